"""
Quick demo script to run the Code & Coffee API locally.

This script starts a local server and shows how to call the recommendation endpoint.
"""

import uvicorn

if __name__ == "__main__":
    print("=" * 60)
    print("Starting Code & Coffee Backend Demo")
    print("=" * 60)
    print()
    print("📌 API Endpoints:")
    print("   - Health Check:    GET    http://localhost:8000/api/health")
    print("   - Quiz Options:    GET    http://localhost:8000/api/quiz/options")
    print("   - Recommendation:  POST   http://localhost:8000/api/recommendation")
    print("   - Responses:       GET/POST/DELETE http://localhost:8000/api/responses")
    print("   - Statistics:      GET    http://localhost:8000/api/stats")
    print("   - API Docs:               http://localhost:8000/docs")
    print()
    print("📝 Test with curl:")
    print('   curl -X POST "http://localhost:8000/api/recommendation" \\')
    print('     -H "Content-Type: application/json" \\')
    print('     -d \'{"language": "Go", "framework": "Gin", "ide": "NeoVim", "vibe": "performance-obsessed"}\'')
    print()
    print("=" * 60)
    print("Starting server on http://localhost:8000")
    print("Press Ctrl+C to stop")
    print("=" * 60)
    print()

    uvicorn.run(
        "coffee_backend.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )
