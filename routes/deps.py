from fastapi import Request
from app.context import PanelContext


def get_context(request: Request) -> PanelContext:
    return request.app.state.panel
