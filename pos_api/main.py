from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from pos_api.api.router import api_router
from pos_api.core.config import settings
from pos_api.core.logging import logger
from pos_api.database import init_db

app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Backend de ponto de venda - catálogo de itens, clientes, notas de venda e relatório diário",
    version=settings.PROJECT_VERSION,
    contact={
        "name": "Suporte Técnico",
        "email": settings.SUPPORT_EMAIL,
    },
)

# Configuração de CORS
if settings.BACKEND_CORS_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[str(origin) for origin in settings.BACKEND_CORS_ORIGINS],
        allow_methods=["*"],
        allow_headers=["*"],
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # detail em texto vira {"message": ...}; detail em dict é devolvido como está
    content = exc.detail if isinstance(exc.detail, dict) else {"message": exc.detail}
    return JSONResponse(status_code=exc.status_code, content=content, headers=getattr(exc, "headers", None))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Invalid request body on {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid request body", "error": jsonable_encoder(exc.errors())},
    )


@app.on_event("startup")
async def connect_database():
    # Falha de conexão é só registrada; o processo continua no ar
    await init_db()


app.include_router(api_router, prefix=settings.API_STR)

# Arquivos estáticos (imagens dos itens etc.)
app.mount("/files", StaticFiles(directory=settings.STATIC_FILES_DIR, check_dir=False), name="files")


@app.get("/", tags=["Root"])
async def read_root():
    return {
        "message": f"Bem-vindo à API {settings.PROJECT_NAME} v{settings.PROJECT_VERSION}",
        "docs": "/docs",
        "status": "operacional",
        "environment": settings.ENVIRONMENT,
    }


@app.get("/health", tags=["Health Check"])
async def health_check():
    """Endpoint para verificação de saúde da API"""
    return {
        "status": "healthy",
        "database": "configured" if settings.DATABASE_URL else "missing",
        "environment": settings.ENVIRONMENT,
    }
