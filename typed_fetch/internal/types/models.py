from enum import Enum
from typing import Optional, Any, Dict, List, Literal, Iterator, Tuple
from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict, Field


class HttpMethod(str, Enum):
    GET = "GET"
    PUT = "PUT"
    POST = "POST"
    DELETE = "DELETE"
    OPTIONS = "OPTIONS"
    HEAD = "HEAD"
    PATCH = "PATCH"
    TRACE = "TRACE"


# Фиксированный порядок обхода методов (порядок объявления в enum)
HTTP_METHODS: List[HttpMethod] = list(HttpMethod)

ParameterIn = Literal["path", "query", "header", "cookie"]


class Reference(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    ref: str = Field(alias="$ref")


class Parameter(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    in_: ParameterIn = Field(alias="in")
    required: Optional[bool] = None
    description: Optional[str] = None
    example: Any = None
    schema_: Any = Field(default=None, alias="schema")


class MediaType(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    schema_: Any = Field(default=None, alias="schema")


class RequestBody(BaseModel):
    required: Optional[bool] = None
    description: Optional[str] = None
    content: Dict[str, MediaType] = {}


class Response(BaseModel):
    description: Optional[str] = None
    content: Dict[str, MediaType] = {}


class ParameterOrRef(BaseModel):
    reference: Optional[Reference] = None
    value: Optional[Parameter] = None


class RequestBodyOrRef(BaseModel):
    reference: Optional[Reference] = None
    value: Optional[RequestBody] = None


class ResponseOrRef(BaseModel):
    reference: Optional[Reference] = None
    value: Optional[Response] = None


class Responses(BaseModel):
    codes: Dict[str, ResponseOrRef] = {}
    default: Optional[ResponseOrRef] = None


class Operation(BaseModel):
    parameters: List[ParameterOrRef] = []
    request_body: Optional[RequestBodyOrRef] = None
    responses: Optional[Responses] = None


class PathItem(BaseModel):
    get: Optional[Operation] = None
    put: Optional[Operation] = None
    post: Optional[Operation] = None
    delete: Optional[Operation] = None
    options: Optional[Operation] = None
    head: Optional[Operation] = None
    patch: Optional[Operation] = None
    trace: Optional[Operation] = None

    def operations(self) -> Iterator[Tuple[HttpMethod, Operation]]:
        """Операции path item в фиксированном порядке методов"""
        for method in HTTP_METHODS:
            operation = getattr(self, method.value.lower())
            if operation is not None:
                yield method, operation


class Components(BaseModel):
    schemas: Dict[str, Any] = {}
    parameters: Dict[str, ParameterOrRef] = {}
    request_bodies: Dict[str, RequestBodyOrRef] = {}
    responses: Dict[str, ResponseOrRef] = {}


class OpenApiSpec(BaseModel):
    openapi: Optional[str] = None
    paths: Dict[str, PathItem] = {}
    components: Components = Components()


@dataclass
class ParamInfo:
    """Сводка по параметрам операции"""

    type_name: str
    required: bool = False
    included: bool = False
    resolved: List[Parameter] = field(default_factory=list)


@dataclass
class BodyInfo:
    """Сводка по телу запроса операции"""

    type_name: str
    required: bool = False
    included: bool = False
    resolved: Optional[RequestBody] = None


class CodeBlock(BaseModel):
    lines: List[str] = []

    def __str__(self):
        return "\n".join(self.lines)


class CodeFile(BaseModel):
    file_name: str
    code_blocks: List[CodeBlock] = []

    def __str__(self):
        return "\n\n".join(filter(bool, map(str, self.code_blocks)))

    def add_code_block(self, code_block, **kwargs) -> "CodeFile":
        if isinstance(code_block, str):
            code_block = CodeBlock(lines=code_block.split("\n"), **kwargs)
        elif isinstance(code_block, list):
            code_block = CodeBlock(lines=code_block, **kwargs)

        self.code_blocks.append(code_block)
        return self
