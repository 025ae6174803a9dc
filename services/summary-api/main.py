"""FastAPI application entry point."""

from contextlib import asynccontextmanager

import uvicorn
from ddtrace import patch_all
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dependencies import close_clients, get_config
from routes import conversation_router, summaries_router

patch_all()


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    close_clients()


_config = get_config()

app = FastAPI(title="Media Summary API", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(_config.server.cors_origins),
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Invocation-Id"],
)
app.include_router(summaries_router)
app.include_router(conversation_router)


if __name__ == "__main__":
    uvicorn.run(app, host=_config.server.host, port=_config.server.port)
