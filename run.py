#!/usr/bin/env python3
"""
SlideCraft Application Runner

Starts the SlideCraft FastAPI application with configuration from the
environment (and a .env file when present).
"""

import os
import sys

import uvicorn
from dotenv import load_dotenv

# Add src to Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

try:
    load_dotenv()
except Exception as e:
    print(f"Warning: Could not load .env file: {e}")
    print("Continuing with system environment variables...")


def main():
    """Main entry point for running the application"""
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))
    reload = os.getenv("RELOAD", "true").lower() in ("true", "1", "yes", "on")
    log_level = os.getenv("LOG_LEVEL", "info").lower()

    config = {
        "app": "slidecraft.main:app",
        "host": host,
        "port": port,
        "reload": reload,
        "log_level": log_level,
        "access_log": True,
    }

    print("Starting SlideCraft Server...")
    print(f"Host: {config['host']}")
    print(f"Port: {config['port']}")
    print(f"Reload: {config['reload']}")
    print(f"Log Level: {config['log_level']}")
    print(f"API Documentation: http://localhost:{config['port']}/docs")
    print("=" * 60)

    try:
        uvicorn.run(**config)
    except KeyboardInterrupt:
        print("\nServer stopped by user")
    except Exception as e:
        print(f"Error starting server: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
