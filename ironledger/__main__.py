"""
Entry point for running the local API with `python -m ironledger`.
"""
import uvicorn

if __name__ == "__main__":
    uvicorn.run("ironledger.app.app:app", host="127.0.0.1", port=8000, reload=True)
