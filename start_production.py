#!/usr/bin/env python3
"""
Production server startup script for the booking webhook API
"""
import uvicorn
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

from booking_webhook.config import settings  # noqa: E402

if __name__ == "__main__":
    uvicorn.run(
        "booking_webhook.api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower()
    )
