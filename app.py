import logging

import uvicorn
from fastapi import FastAPI, HTTPException

import engine
from config import settings
from logs import configure_logging
from models import (
    BatchScanRequest,
    BatchScanResult,
    PathScanRequest,
    Policy,
    RepoScanResult,
    ScanRequest,
    ScanResult,
)


def create_app() -> FastAPI:
    configure_logging(settings.log_level)
    log = logging.getLogger("app")

    # in-memory store
    policies: dict[str, Policy] = {}
    engine.init_stores(policies)

    # seed default policy
    engine.register_policy(Policy(name=settings.default_policy, block_patterns=settings.default_block_patterns))

    app = FastAPI(title=settings.app_name)

    @app.get("/health")
    def health():
        """health check"""
        return {"status": "ok", "policies": len(engine.list_policies())}

    @app.post("/policies")
    def create_policy(policy: Policy):
        """register a policy"""
        engine.register_policy(policy)
        return {"ok": True, "name": policy.name}

    @app.get("/policies", response_model=list[Policy])
    def list_policies():
        return engine.list_policies()

    @app.get("/policies/{name}", response_model=Policy)
    def get_policy(name: str):
        """get policy by name"""
        try:
            return engine.get_policy(name)
        except engine.PolicyNotFoundError as e:
            raise HTTPException(status_code=404, detail=str(e))

    @app.post("/scan", response_model=ScanResult)
    def scan(req: ScanRequest):
        """scan one submission"""
        try:
            return engine.check(req)
        except engine.PolicyNotFoundError as e:
            raise HTTPException(status_code=404, detail=str(e))

    @app.post("/scan/batch", response_model=BatchScanResult)
    def scan_batch(req: BatchScanRequest):
        """scan several submissions in one call"""
        try:
            return BatchScanResult(results=engine.check_batch(req.items))
        except engine.PolicyNotFoundError as e:
            raise HTTPException(status_code=404, detail=str(e))

    @app.post("/scan/file", response_model=ScanResult)
    def scan_file(req: PathScanRequest):
        """scan a stored file below the source root"""
        try:
            return engine.check_file(req.path, req.forbidden, req.policy)
        except engine.PolicyNotFoundError as e:
            raise HTTPException(status_code=404, detail=str(e))
        except FileNotFoundError as e:
            raise HTTPException(status_code=404, detail=str(e))
        except UnicodeDecodeError:
            raise HTTPException(status_code=400, detail=f"file is not utf-8 text: {req.path}")
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))

    @app.post("/scan/repo", response_model=RepoScanResult)
    def scan_repo(req: PathScanRequest):
        """scan every stored file below a directory of the source root"""
        try:
            return engine.check_repo(req.path, req.forbidden, req.policy)
        except engine.PolicyNotFoundError as e:
            raise HTTPException(status_code=404, detail=str(e))
        except FileNotFoundError as e:
            raise HTTPException(status_code=404, detail=str(e))
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))

    log.info("%s ready with default policy %s", settings.app_name, settings.default_policy)
    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host=settings.host, port=settings.port)
