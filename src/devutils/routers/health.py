from fastapi import APIRouter

from devutils.shared import load_config

router = APIRouter(tags=["health"])

config = load_config()


@router.get("/health")
async def health():
    return {"status": "ok", "version": config.general.version}
