"""
FastAPI routers grouped by domain (auth, users, saved searches).

Each file inside this package exposes an APIRouter included by the app
factory, keeping endpoint definitions close to their use cases.
"""
