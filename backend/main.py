import uvicorn
from rule_designer.core.config import settings


def main():
    """Start the FastAPI backend server."""
    uvicorn.run("rule_designer.main:app", host=settings.HOST, port=settings.PORT, reload=True)


if __name__ == "__main__":
    main()
