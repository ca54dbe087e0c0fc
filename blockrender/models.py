"""Pydantic models for the block tree handed to the renderer."""

from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .plugins import resolve_handler


class Message(BaseModel):
    """Diagnostic produced alongside rendered output."""

    severity: Literal["error", "warning", "info"] = Field(
        "warning", description="How serious the diagnostic is."
    )
    line: int = Field(0, description="Source line the diagnostic refers to.")
    text: str = Field(..., description="Human readable description.")

    model_config = ConfigDict(frozen=True)


class BlockBase(BaseModel):
    """Fields shared by every block variant."""

    attrs: Union[None, str, Dict[str, List[str]]] = Field(
        None,
        description=(
            "Explicit attributes, either raw attribute-list text or a parsed "
            "mapping from name to values."
        ),
    )
    lnb: int = Field(0, description="Line number of the block in the source document.")

    model_config = ConfigDict(frozen=True)


class Para(BlockBase):
    kind: Literal["para"] = "para"
    lines: List[str] = Field(default_factory=list)


class Heading(BlockBase):
    kind: Literal["heading"] = "heading"
    level: int = Field(..., ge=1, le=6)
    content: str = ""


class BlockQuote(BlockBase):
    kind: Literal["blockquote"] = "blockquote"
    blocks: List["Block"] = Field(default_factory=list)


class Code(BlockBase):
    kind: Literal["code"] = "code"
    lines: List[str] = Field(default_factory=list)
    language: Optional[str] = None


class Ruler(BlockBase):
    kind: Literal["ruler"] = "ruler"
    type: Literal["-", "_", "*"] = "-"


class ListBlock(BlockBase):
    kind: Literal["list"] = "list"
    type: Literal["ul", "ol"] = "ul"
    blocks: List["Block"] = Field(default_factory=list)


class ListItem(BlockBase):
    kind: Literal["list_item"] = "list_item"
    type: Literal["ul", "ol"] = "ul"
    blocks: List["Block"] = Field(default_factory=list)
    spaced: bool = Field(
        True, description="Loose items keep their paragraph markup; tight ones lose it."
    )


class Table(BlockBase):
    kind: Literal["table"] = "table"
    header: Optional[List[str]] = None
    rows: List[List[str]] = Field(default_factory=list)
    alignments: List[Optional[Literal["left", "center", "right"]]] = Field(
        default_factory=list,
        description="Alignment per column; its length is the number of columns.",
    )


class Html(BlockBase):
    kind: Literal["html"] = "html"
    html: List[str] = Field(default_factory=list)


class HtmlOther(BlockBase):
    kind: Literal["html_other"] = "html_other"
    html: List[str] = Field(default_factory=list)


class FnDef(BaseModel):
    """A footnote definition collected by the parser."""

    id: Optional[str] = None
    number: int = Field(..., ge=1)
    blocks: List["Block"] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class FnList(BlockBase):
    kind: Literal["fn_list"] = "fn_list"
    blocks: List[FnDef] = Field(default_factory=list)


class Ial(BlockBase):
    kind: Literal["ial"] = "ial"
    content: str = ""


class IdDef(BlockBase):
    kind: Literal["id_def"] = "id_def"
    id: Optional[str] = None
    url: Optional[str] = None
    title: Optional[str] = None


class Plugin(BlockBase):
    kind: Literal["plugin"] = "plugin"
    lines: List[str] = Field(default_factory=list)
    handler: Any = Field(
        ...,
        description="Object with render(lines); a 'module:attribute' string is imported.",
    )

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @field_validator("handler", mode="before")
    @classmethod
    def _load_handler(cls, value: Any) -> Any:
        return resolve_handler(value)


Block = Annotated[
    Union[
        Para,
        Heading,
        BlockQuote,
        Code,
        Ruler,
        ListBlock,
        ListItem,
        Table,
        Html,
        HtmlOther,
        FnList,
        Ial,
        IdDef,
        Plugin,
    ],
    Field(discriminator="kind"),
]


class Document(BaseModel):
    """Top-level container used when loading blocks from JSON or YAML."""

    blocks: List[Block] = Field(default_factory=list)


for _model in (BlockQuote, ListBlock, ListItem, FnDef, FnList, Document):
    _model.model_rebuild()


__all__ = [
    "Block",
    "BlockBase",
    "BlockQuote",
    "Code",
    "Document",
    "FnDef",
    "FnList",
    "Heading",
    "Html",
    "HtmlOther",
    "Ial",
    "IdDef",
    "ListBlock",
    "ListItem",
    "Message",
    "Para",
    "Plugin",
    "Ruler",
    "Table",
]
