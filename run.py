#!/usr/bin/env python3
"""
Run script for deployment
"""

import os
import uvicorn
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

from app.main import app  # noqa: E402

if __name__ == "__main__":
    # Get port from environment variable (hosting platforms set this)
    port = int(os.environ.get("PORT", 8000))
    
    # Run the application
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=port,
        log_level="info"
    )
