# FastAPI application redirect
# Lets uvicorn find the app when running from the repository root:
#   uvicorn main:app --host 0.0.0.0 --port 8000

from unofit.main import app  # noqa: F401
