import json
import os
from pathlib import Path

from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse

from aura.logging import configure_logging, get_logger

app = FastAPI(title="Mock Aura Server", version="1.0.0")
logger = get_logger("mock_aura_server")
DATA_DIR = Path(os.environ.get("AURA_STUB_DIR", Path(__file__).parent / "data"))

@app.get("/health")
def health(): return {"status": "ok"}

@app.get("/accounts/{user_id}")
def get_accounts(user_id: str):
    file = DATA_DIR / f"accounts_{user_id}.json"
    if not file.exists():
        logger.info("stub_not_found", user_id=user_id)
        raise HTTPException(status_code=404, detail="user not found")
    return JSONResponse(content=json.loads(file.read_text()))

if __name__ == "__main__":
    import uvicorn
    configure_logging()
    uvicorn.run(app, host="0.0.0.0", port=8080)
