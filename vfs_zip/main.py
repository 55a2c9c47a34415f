from fastapi import FastAPI, UploadFile, File, HTTPException
from .models import DetectResponse, HealthResponse, OptionNamesResponse, ResolveRequest, ResolveResponse
from .charset import ZipCharset
from .errors import InvalidOptionError, OptionRegistryError
from .options import registry

app = FastAPI(
    title="vfs-zip",
    description="File options for ZIP virtual file systems",
    version="1.0.0",
)

@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}

@app.get("/options", response_model=OptionNamesResponse)
def option_names():
    return {"names": registry.names()}

@app.post("/options/resolve", response_model=ResolveResponse)
def resolve_options(body: ResolveRequest):
    try:
        resolved = registry.create_all(body.options)
    except (InvalidOptionError, OptionRegistryError) as exc:
        raise HTTPException(status_code=422, detail=str(exc))

    merged = {}
    for option in resolved:
        merged.update(option.to_json())
    return {"options": merged}

@app.post("/options/detect", response_model=DetectResponse)
async def detect_charset(file: UploadFile = File(...)):
    raw = await file.read()
    if not raw:
        raise HTTPException(status_code=422, detail="Empty sample")

    try:
        option = ZipCharset.detect(raw)
    except InvalidOptionError as exc:
        raise HTTPException(status_code=422, detail=str(exc))

    return {
        "option": option.to_json(),
        "detected": option.charset.name,
        "sample_bytes": len(raw),
    }
