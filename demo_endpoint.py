"""
Quick demo script to run the Maharishi backend locally.

This script starts a local server and shows how to make requests to the endpoints.
"""

import uvicorn

if __name__ == "__main__":
    print("=" * 60)
    print("Starting Maharishi Agri Assistant Backend Demo")
    print("=" * 60)
    print()
    print("📌 API Endpoints:")
    print("   - Health Check:     GET  http://localhost:8000/health")
    print("   - Crop Advice:      POST http://localhost:8000/recommendations/crops")
    print("   - Open Chat:        POST http://localhost:8000/chat/sessions")
    print("   - Send Message:     POST http://localhost:8000/chat/sessions/<id>/messages")
    print("   - Marketplace:      GET  http://localhost:8000/marketplace/listings")
    print("   - Weather:          GET  http://localhost:8000/weather/261001")
    print("   - API Docs:              http://localhost:8000/docs")
    print()
    print("🔑 AI features need GOOGLE_API_KEY in your .env file.")
    print()
    print("📝 Test with curl:")
    print('   curl -X POST "http://localhost:8000/recommendations/crops" \\')
    print('     -H "Content-Type: application/json" \\')
    print('     -d \'{"location": "261001", "soil_type": "Alluvial", "season": "Rabi (Winter)"}\'')
    print()
    print('   curl -N -X POST "http://localhost:8000/chat/sessions/<id>/messages" \\')
    print('     -H "Content-Type: application/json" \\')
    print('     -d \'{"message": "How do I control aphids on mustard?"}\'')
    print()
    print("=" * 60)
    print("Starting server on http://localhost:8000")
    print("Press Ctrl+C to stop")
    print("=" * 60)
    print()

    uvicorn.run(
        "maharishi.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )
