from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from farmchat.config import settings
from farmchat.logs import init_logging
from farmchat.db import setup_mongo
from farmchat.chat import router as chat_router

init_logging(settings.log_level)

app = FastAPI(title="Farm Chat - soil & weather aware farming advice", version="0.1.0")
setup_mongo(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"], allow_credentials=True,
    allow_methods=["*"], allow_headers=["*"]
)

@app.get("/health")
def health():
    return {"ok": True}

app.include_router(chat_router, prefix="/chat", tags=["Chat"])

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
