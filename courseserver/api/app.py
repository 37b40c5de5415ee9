"""FastAPI application factory for the course server."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from ..config import Config, validate_content_root
from ..constants import RESOURCES_DIR, STATIC_ROUTE
from ..content import CourseAssembler, DescriptorLoader, TaskCache, TaskResolver
from ..services.content_service import ContentService
from ..utils.errors import CourseAssemblyError
from .routes import router

logger = logging.getLogger(__name__)


def create_app(config: Config) -> FastAPI:
    """Create the course API application.

    Content is assembled in the lifespan hook, before the first request is
    served. An assembly failure aborts startup.

    Raises:
        ConfigurationError: If the content root does not exist
    """
    content_root = validate_content_root(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Assembling course from {content_root}")
        loader = DescriptorLoader(content_root)
        cache = TaskCache()
        resolver = TaskResolver(loader, cache)
        assembler = CourseAssembler(loader, resolver)

        try:
            state = await assembler.assemble()
        except CourseAssemblyError as e:
            logger.error(f"Course assembly failed: {e}")
            raise

        app.state.content_service = ContentService(state, resolver)
        yield
        logger.info("Course server shutting down")

    app = FastAPI(title="Course Server", lifespan=lifespan)
    app.include_router(router)

    resources = content_root / RESOURCES_DIR
    if resources.is_dir():
        app.mount(STATIC_ROUTE, StaticFiles(directory=resources), name="static")
    else:
        logger.warning(f"No resources directory at {resources}, static files disabled")

    return app
