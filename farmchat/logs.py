# farmchat/logs.py
import logging

_INITIALIZED = False

def init_logging(level: str = "INFO") -> None:
    global _INITIALIZED
    if _INITIALIZED:
        return
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        handlers=[logging.StreamHandler()],
    )
    _INITIALIZED = True
