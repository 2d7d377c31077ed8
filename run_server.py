#!/usr/bin/env python3
"""
Server launcher for the Jenkins webhook receiver.

Binds to HOST/PORT from the environment (or .env), default 0.0.0.0:3000.
"""

import uvicorn

from app.config import settings

if __name__ == "__main__":
    print("Starting Jenkins Webhook Receiver")
    print(f"Webhooks accepted at: http://{settings.host}:{settings.port}/jenkins-webhook")
    print(f"API documentation at: http://{settings.host}:{settings.port}/docs")
    print("\n" + "=" * 50 + "\n")

    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )
