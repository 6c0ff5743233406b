"""
Quick demo script to run the build recommendation endpoint locally.

This script starts a local server and shows how to make requests to the endpoint.
"""

import uvicorn

if __name__ == "__main__":
    print("=" * 60)
    print("Starting PC Build Advisor Backend Demo")
    print("=" * 60)
    print()
    print("📌 API Endpoints:")
    print("   - Health Check:  GET  http://localhost:8000/health")
    print("   - Generate:      POST http://localhost:8000/api/generate")
    print("   - API Docs:           http://localhost:8000/docs")
    print()
    print("🔐 Configuration:")
    print("   GEMINI_API_KEY must be set (environment or .env file)")
    print()
    print("📝 Test with curl:")
    print('   curl -X POST "http://localhost:8000/api/generate" \\')
    print('     -H "Content-Type: application/json" \\')
    print('     -d \'{"prompt": "Gaming PC for 1440p under 1.5 lakh"}\'')
    print()
    print("=" * 60)
    print("Starting server on http://localhost:8000")
    print("Press Ctrl+C to stop")
    print("=" * 60)
    print()

    uvicorn.run(
        "buildadvisor.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )
