"""
Quick demo script to run the Hobby to Hustle backend locally.

This script starts a local server and shows how to make requests to the endpoints.
"""

import uvicorn

if __name__ == "__main__":
    print("=" * 60)
    print("Starting Hobby to Hustle Backend Demo")
    print("=" * 60)
    print()
    print("📌 API Endpoints:")
    print("   - Health Check:      GET  http://localhost:8000/health")
    print("   - Hobby Ideas:       POST http://localhost:8000/functions/generate-hobby-ideas")
    print("   - Course Recs:       POST http://localhost:8000/functions/generate-course-recommendations")
    print("   - Trending Hobbies:  POST http://localhost:8000/functions/get-trending-hobbies")
    print("   - Opportunities:     GET  http://localhost:8000/opportunities")
    print("   - Course Catalog:    GET  http://localhost:8000/courses?search=photo")
    print("   - API Docs:               http://localhost:8000/docs")
    print("   - ReDoc:                  http://localhost:8000/redoc")
    print()
    print("🔐 Authentication:")
    print("   Only /learning/* requires:")
    print("   Authorization: Bearer <token>")
    print()
    print("📝 Test with curl:")
    print('   curl -i -X POST "http://localhost:8000/functions/generate-hobby-ideas" \\')
    print('     -H "Content-Type: application/json" \\')
    print('     -d \'{"hobby": "painting"}\'')
    print()
    print('   curl "http://localhost:8000/opportunities?location=koregaon-park&budget_min=4000"')
    print()
    print("=" * 60)
    print("Starting server on http://localhost:8000")
    print("Press Ctrl+C to stop")
    print("=" * 60)
    print()

    uvicorn.run(
        "backend.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )
