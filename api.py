import time

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from config import STEM_WORDS
from word_tags import count_html

app = FastAPI()

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class CountRequest(BaseModel):
    html: str
    stem: bool = STEM_WORDS


@app.get("/health")
async def health_check():
    return {"status": "healthy", "message": "Word tag counter is running"}

@app.get("/")
async def root():
    return {"message": "Welcome to Word Tag Count API", "docs": "/docs"}

@app.post("/count")
def count_endpoint(req: CountRequest):
    if not req.html.strip():
        raise HTTPException(status_code=400, detail="html must not be empty")
    start_time = time.time()
    words = count_html(req.html, stem=req.stem)
    return {"words": words, "distinct": len(words), "response_time": time.time() - start_time}
