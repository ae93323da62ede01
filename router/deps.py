from fastapi import Request
from config.settings import AppSettings
from services.pipeline_runner import PipelineRunner

def get_runner(request: Request) -> PipelineRunner:
    """The runner built at startup in create_app()"""
    return request.app.state.runner

def get_app_settings(request: Request) -> AppSettings:
    """The settings create_app() was built with"""
    return request.app.state.settings
