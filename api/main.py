import os
import logging
import logging.config

import yaml
from fastapi import FastAPI, HTTPException

from api.schemas import DecorateRequest, DecorateResponse
from hastdeco.errors import DecorationError
from hastdeco.hast import stringify, to_dict
from hastdeco.pipeline import decorate_code


def setup_logging():
    cfg_path = os.path.join("configs", "logging.yaml")
    if os.path.exists(cfg_path):
        try:
            with open(cfg_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
            os.makedirs("logs", exist_ok=True)
            logging.config.dictConfig(config)
        except (OSError, ValueError, yaml.YAMLError) as e:
            print(f"[logging] Failed to load logging.yaml: {e}")
            logging.basicConfig(level=logging.INFO)
    else:
        logging.basicConfig(level=logging.INFO)


setup_logging()
logger = logging.getLogger("api")

app = FastAPI(
    title="hastdeco",
    version="0.1.0",
    description="Wrap ranges of highlighted code in decoration elements.",
)


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.post("/decorate", response_model=DecorateResponse)
def decorate(req: DecorateRequest) -> DecorateResponse:
    logger.info("Received /decorate request with %d decorations", len(req.decorations))
    try:
        tree = decorate_code(req.code, [d.to_item() for d in req.decorations])
    except DecorationError as e:
        logger.warning("Rejected decorations: %s", e)
        raise HTTPException(status_code=422, detail=str(e)) from e
    return DecorateResponse(tree=to_dict(tree), text=stringify(tree))
