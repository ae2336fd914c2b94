import sys
import asyncio
import uvicorn

# Enforce ProactorEventLoop on Windows BEFORE ANYTHING ELSE
# asyncio.create_subprocess_exec (shell side effects) needs it there
if sys.platform == 'win32':
    asyncio.set_event_loop_policy(asyncio.WindowsProactorEventLoopPolicy())

if __name__ == "__main__":
    # Pass the app object directly to avoid import issues and subprocess spawning
    from main import app

    settings = app.state.panel.settings
    print(f"Starting {app.state.panel.title} on http://{settings.host}:{settings.port}")

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower()
    )
