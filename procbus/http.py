"""
HTTP transport for a procedure registry - FastAPI app exposing procedures by dotted path
"""
import json
from typing import Any, List, Optional

from fastapi import Body, FastAPI, HTTPException
from pydantic import BaseModel, ValidationError
import uvicorn

from logcore import get_logger
from procbus.registry import ProcedureNotFoundError, ProcedureRegistry, default_registry

logger = get_logger(__name__)


# Models
class ProcedureInfo(BaseModel):
    path: str
    description: str


def create_app(registry: Optional[ProcedureRegistry] = None) -> FastAPI:
    """
    Build a FastAPI app serving the given registry.

    Routes:
        GET  /procedures         list registered paths
        POST /procedures/{path}  call a procedure, JSON body is the payload
        GET  /health             liveness
    """
    registry = registry if registry is not None else default_registry
    app = FastAPI(title="procbus", description="Path-addressed procedure calls over HTTP")

    @app.get('/procedures', response_model=List[ProcedureInfo])
    async def list_procedures():
        """List registered procedures"""
        return [
            ProcedureInfo(path=p.key, description=p.description)
            for p in registry.procedures()
        ]

    @app.post('/procedures/{path}')
    def call_procedure(path: str, payload: Any = Body(default=None)):
        """Invoke the procedure bound at a dotted path"""
        try:
            return registry.call(path, payload)
        except ProcedureNotFoundError as e:
            raise HTTPException(status_code=404, detail=str(e))
        except ValidationError as e:
            raise HTTPException(status_code=422, detail=json.loads(e.json()))
        except Exception as e:
            logger.error(
                "Procedure failed",
                exc_info=True,
                extra={'context': {'path': path}}
            )
            raise HTTPException(status_code=500, detail=f"{type(e).__name__}: {e}")

    @app.get('/health')
    async def health():
        """Health check endpoint"""
        return {'status': 'healthy'}

    return app


def run_server(host: str = '127.0.0.1', port: int = 8080, registry: Optional[ProcedureRegistry] = None):
    """Serve a registry over HTTP"""
    uvicorn.run(create_app(registry), host=host, port=port)
