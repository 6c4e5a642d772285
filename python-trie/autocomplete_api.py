import asyncio
import logging
import os
from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse

from trie import Trie
from trie_dictionary import load_dictionary

log = logging.getLogger("python_trie")

DICTIONARY_PATH = os.environ.get("TRIE_DICTIONARY")  # optional CSV loaded at startup
MAX_COMPLETIONS = int(os.environ.get("TRIE_MAX_COMPLETIONS", "50"))

app = FastAPI(title="Trie Autocomplete API", version="0.1.0")


def get_trie() -> Trie:
    # only touched from async endpoints, on the event loop thread
    if not hasattr(app.state, "trie"):
        app.state.trie = Trie()
    return app.state.trie


def clean_word(value: Optional[str], name: str) -> str:
    # whitespace is part of a word; only blank input is refused
    if not isinstance(value, str) or not value.strip():
        raise HTTPException(status_code=400, detail=f"{name} is required")
    return value


@app.on_event("startup")
async def startup():
    if DICTIONARY_PATH:
        app.state.trie = await asyncio.to_thread(load_dictionary, DICTIONARY_PATH)
    get_trie()
    log.info("Autocomplete trie ready")


@app.get("/health")
async def health():
    return {"ok": True}


@app.get("/api/complete")
async def complete(prefix: str, limit: int = 10):
    prefix = clean_word(prefix, "prefix")
    limit = max(1, min(limit, MAX_COMPLETIONS))
    completions = get_trie().get_completions(prefix)
    return {"prefix": prefix, "completions": completions[:limit]}


@app.get("/api/contains")
async def contains(word: str):
    word = clean_word(word, "word")
    return {"word": word, "found": get_trie().contains(word)}


@app.get("/api/words")
async def list_words():
    words = get_trie().words()
    return {"words": words, "count": len(words)}


@app.post("/api/words")
async def add_word(data: Dict[str, Any]):
    word = clean_word(data.get("word"), "word")
    get_trie().insert(word)
    return JSONResponse({"ok": True})


@app.delete("/api/words/{word}")
async def remove_word(word: str):
    word = clean_word(word, "word")
    if not get_trie().remove(word):
        raise HTTPException(status_code=404, detail=f"{word!r} is not in the dictionary")
    return {"ok": True}


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
    uvicorn.run(app, host="0.0.0.0", port=8000)
