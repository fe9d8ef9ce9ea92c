# api/schemas.py

from typing import Any, Dict, List, Optional, Union
from pydantic import BaseModel

from hastdeco.models import DecorationItem, SourcePosition


class PositionSchema(BaseModel):
    line: int
    character: int


class DecorationSchema(BaseModel):
    start: Union[int, PositionSchema]
    end: Union[int, PositionSchema]
    tag_name: Optional[str] = None
    properties: Dict[str, Any] = {}
    always_wrap: bool = False

    def to_item(self) -> DecorationItem:
        def bound(value):
            if isinstance(value, PositionSchema):
                return SourcePosition(line=value.line, character=value.character)
            return value

        return DecorationItem(
            start=bound(self.start),
            end=bound(self.end),
            tag_name=self.tag_name,
            properties=dict(self.properties),
            always_wrap=self.always_wrap,
        )


class DecorateRequest(BaseModel):
    code: str
    decorations: List[DecorationSchema] = []


class DecorateResponse(BaseModel):
    tree: Dict[str, Any]
    text: str
