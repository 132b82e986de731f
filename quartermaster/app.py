#!/usr/bin/env python3

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from quartermaster.routes import api
from quartermaster.core import db
from quartermaster.core.exceptions import ErrorKind, QuartermasterError
from quartermaster.configs import OPTIONS, CORS_ORIGINS
from quartermaster import __version__ as VERSION

logger = logging.getLogger(__name__)

STATUS_CODES = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    db.init()
    yield


app = FastAPI(
    title="Quartermaster API",
    description="Quartermaster: equipment lending ledger",
    version=VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(QuartermasterError)
async def quartermaster_error_handler(request: Request, exc: QuartermasterError):
    if exc.kind is ErrorKind.INTERNAL:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=STATUS_CODES[exc.kind], content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    fields = ", ".join(".".join(str(p) for p in err["loc"][1:]) or err["loc"][0] for err in exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": ErrorKind.VALIDATION.value, "message": f"Invalid request fields: {fields}."},
    )


app.include_router(api.router, prefix="/v1/api")

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("quartermaster.app:app", **OPTIONS)
