from __future__ import annotations
import os
from typing import Dict, List
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel
from .settings import Settings
from .orchestrator import Orchestrator
from .config import IniDocument, ConfigMaterializer

class IniFileView(BaseModel):
    file: str
    path: str
    sections: Dict[str, Dict[str, List[str]]]

def create_app(settings: Settings) -> FastAPI:
    app = FastAPI(title="VEIN Launcher API", version="0.3.0")

    @app.get("/health")
    def health():
        return {"ok": True}

    @app.get("/plan")
    def plan():
        # dry run against the current environment; nothing is written
        return Orchestrator(settings, os.environ).plan().to_dict()

    @app.get("/config/{file_name}", response_model=IniFileView)
    def get_config(file_name: str):
        if settings.config_path is None:
            raise HTTPException(status_code=503, detail="config_path_not_set")
        materializer = ConfigMaterializer(settings.config_path)
        if file_name not in materializer.file_names:
            raise HTTPException(status_code=404, detail="unknown_config_file")
        path = materializer.path_for(file_name)
        if not path.is_file():
            raise HTTPException(status_code=404, detail="config_file_not_found")
        doc = IniDocument.load(path)
        return IniFileView(file=file_name, path=str(path), sections=doc.as_dict())

    return app
