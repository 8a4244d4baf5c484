from __future__ import annotations
import logging

from fastapi import FastAPI, Query, HTTPException
from pydantic import BaseModel

from .config import trace_enabled
from .gematria import decode, encode, is_canonical_gimatria

logger = logging.getLogger(__name__)

app = FastAPI(title="hgimatria")

class EncodeOut(BaseModel):
    n: int
    numeral: str

class DecodeOut(BaseModel):
    numeral: str
    value: int

class CheckOut(BaseModel):
    word: str
    value: int
    canonical: bool

@app.get("/encode", response_model=EncodeOut)
def api_encode(
    n: int = Query(..., ge=0, description="מספר להמרה לאותיות"),
):
    return EncodeOut(n=n, numeral=encode(n, trace=trace_enabled()))

@app.get("/decode", response_model=DecodeOut)
def api_decode(
    numeral: str = Query(..., min_length=1, description="מספר באותיות עבריות"),
):
    if not numeral.strip():
        raise HTTPException(status_code=400, detail="נא להזין מספר באותיות")
    return DecodeOut(numeral=numeral, value=decode(numeral, trace=trace_enabled()))

@app.get("/check", response_model=CheckOut)
def api_check(
    word: str = Query(..., min_length=1, description="מילה לבדיקה"),
):
    value = is_canonical_gimatria(word, trace=trace_enabled())
    if not value:
        logger.debug("not a canonical numeral: %r", word)
    return CheckOut(word=word, value=value, canonical=value != 0)
