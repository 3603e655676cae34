"""
Blog Post API

CRUD endpoints for blog posts. Each handler validates its input and makes
exactly one store call.
"""
import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, APIRouter, Depends, HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import Response
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from apps.shared.cors import setup_cors
from apps.shared.database import check_db_connection, dispose_engine, init_db
from apps.shared.errors import error_response, internal_error_response
from apps.shared.request_logging import setup_request_logging
from apps.blog.representation import to_representation
from apps.blog.schemas import (
    BlogPostCreate,
    BlogPostUpdate,
    BlogPostResponse,
    BlogPostList,
)
from apps.blog.store import BlogPostStore, get_store

logger = logging.getLogger(__name__)
logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO"))

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8080"))

# Fixed page size for the list endpoint
LIST_LIMIT = 10


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the store at startup, close it at shutdown."""
    init_db()
    logger.info("Blog post service ready")
    yield
    logger.info("Closing server")
    dispose_engine()


app = FastAPI(
    title="Blog Post API",
    version="1.0.0",
    description="Create, read, update and delete blog posts",
    lifespan=lifespan,
)

setup_cors(app)
setup_request_logging(app)


# ──────────────────────────────────────────────────────────────────────────────
# Error handlers
# ──────────────────────────────────────────────────────────────────────────────

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    missing = [
        err["loc"][1]
        for err in errors
        if err["type"] == "missing" and len(err["loc"]) == 2 and err["loc"][0] == "body"
    ]
    if missing:
        message = f"Missing `{missing[0]}` in request body"
        logger.warning(message)
        return error_response(message, status.HTTP_400_BAD_REQUEST)

    if any(err["type"] == "missing" and tuple(err["loc"]) == ("body",) for err in errors):
        logger.warning("Missing request body on %s %s", request.method, request.url.path)
        return error_response("Missing request body", status.HTTP_400_BAD_REQUEST)

    logger.warning("Invalid request body on %s %s", request.method, request.url.path)
    return error_response(
        "Invalid request body",
        422,
        errors=jsonable_encoder(errors),
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # A known path with an unsupported method is just another unmatched route
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        return error_response("Not Found", status.HTTP_404_NOT_FOUND)

    response = error_response(str(exc.detail), exc.status_code)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


@app.exception_handler(SQLAlchemyError)
async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    return internal_error_response(exc, f"{request.method} {request.url.path}")


@app.exception_handler(Exception)
async def unexpected_exception_handler(request: Request, exc: Exception):
    return internal_error_response(exc, f"{request.method} {request.url.path}")


# ──────────────────────────────────────────────────────────────────────────────
# Routes
# ──────────────────────────────────────────────────────────────────────────────

router = APIRouter(prefix="/blogpost", tags=["blogpost"])


@app.get("/health")
def health():
    """Health check endpoint - returns service status and database connectivity"""
    db_connected = check_db_connection()
    return {
        "status": "ok" if db_connected else "degraded",
        "service": "blogpost",
        "database": "connected" if db_connected else "disconnected",
    }


@router.get("", response_model=BlogPostList)
def list_posts(store: BlogPostStore = Depends(get_store)):
    """List up to 10 blog posts."""
    posts = store.find(limit=LIST_LIMIT)
    return {"blogpost": [to_representation(post) for post in posts]}


@router.get("/{post_id}", response_model=BlogPostResponse)
def get_post(post_id: str, store: BlogPostStore = Depends(get_store)):
    """Get a single blog post by id."""
    post = store.find_by_id(post_id)
    if post is None:
        raise HTTPException(status_code=404, detail="Blog post not found")
    return to_representation(post)


@router.post("", response_model=BlogPostResponse, status_code=201)
def create_post(payload: BlogPostCreate, store: BlogPostStore = Depends(get_store)):
    """Create a new blog post."""
    post = store.insert(
        title=payload.title,
        content=payload.content,
        author=payload.author.model_dump(),
    )
    return to_representation(post)


@router.put("/{post_id}", status_code=204)
def update_post(
    post_id: str,
    payload: BlogPostUpdate,
    store: BlogPostStore = Depends(get_store),
):
    """
    Update the fields sent in the body; everything else is left as stored.
    The body must repeat the path id.
    """
    if not (post_id and isinstance(payload.id, str) and post_id == payload.id):
        message = (
            f"Request path id ({post_id}) and request body id "
            f"({payload.id}) must match"
        )
        logger.warning(message)
        raise HTTPException(status_code=400, detail=message)

    store.update_by_id(post_id, payload.changes())
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{post_id}", status_code=204)
def delete_post(post_id: str, store: BlogPostStore = Depends(get_store)):
    """Delete a blog post. Deleting an unknown id still succeeds."""
    store.delete_by_id(post_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


app.include_router(router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=HOST, port=PORT)
