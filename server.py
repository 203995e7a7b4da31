import os

from dotenv import load_dotenv

load_dotenv()

# --- Centralized state module ---
from api_utils.server_state import state
from api_utils import create_app

logger = state.logger

# --- FastAPI App ---
app = create_app()


if __name__ == "__main__":
    import uvicorn

    host = os.environ.get("HOST", "0.0.0.0")
    port = int(os.environ.get("PORT", 2048))
    uvicorn.run(
        "server:app", host=host, port=port, log_level="info", access_log=False
    )
