from pydantic import BaseModel


class HeapConfig(BaseModel):
    name: str = "default"
    # Re-check heap order after every insert/extract
    verify: bool = False
