import uvicorn

from videohub.api import create_app
from videohub.env import get_settings

settings = get_settings()
app = create_app(settings)

if __name__ == "__main__":
    print(f"Server is running on port {settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port)
