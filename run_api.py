# run_api.py

"""
Run the collection gateway with uvicorn
"""

import uvicorn

from gateway.config import settings


def main():
    """Run the FastAPI server"""

    print("Starting collection gateway...")
    print(f"Host: {settings.api_host}:{settings.api_port}")
    print(f"Environment: {settings.environment}")
    print(f"MongoDB database: {settings.db_name}")

    uvicorn.run(
        "gateway.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.environment == "development",
        log_level=settings.log_level.lower(),
        access_log=True,
    )


if __name__ == "__main__":
    main()
