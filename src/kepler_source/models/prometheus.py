# src/kepler_source/models/prometheus.py
"""
Pydantic models for the Prometheus HTTP API query response.

The `data` section is a tagged variant keyed on `resultType`, so callers
match on the concrete result class instead of inspecting raw dictionaries.
"""

from typing import Dict, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field
from typing_extensions import Annotated

# Prometheus encodes sample values as [<unix timestamp>, "<float as string>"].
SamplePair = Tuple[float, str]


class VectorSample(BaseModel):
    """
    One series of an instant vector: its labels and a single sample.
    """

    metric: Dict[str, str] = Field(default_factory=dict)
    value: SamplePair

    @property
    def timestamp(self) -> float:
        return self.value[0]

    @property
    def sample_value(self) -> float:
        return float(self.value[1])


class MatrixSeries(BaseModel):
    metric: Dict[str, str] = Field(default_factory=dict)
    values: List[SamplePair] = Field(default_factory=list)


class VectorResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    result_type: Literal["vector"] = Field("vector", alias="resultType")
    result: List[VectorSample] = Field(default_factory=list)


class MatrixResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    result_type: Literal["matrix"] = Field("matrix", alias="resultType")
    result: List[MatrixSeries] = Field(default_factory=list)


class ScalarResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    result_type: Literal["scalar"] = Field("scalar", alias="resultType")
    result: SamplePair


class StringResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    result_type: Literal["string"] = Field("string", alias="resultType")
    result: SamplePair


QueryResult = Annotated[
    Union[VectorResult, MatrixResult, ScalarResult, StringResult],
    Field(discriminator="result_type"),
]


class QueryResponse(BaseModel):
    """
    The envelope returned by `/api/v1/query`, for both success and error.
    """

    model_config = ConfigDict(populate_by_name=True)

    status: Literal["success", "error"]
    data: Optional[QueryResult] = None
    error_type: Optional[str] = Field(None, alias="errorType")
    error: Optional[str] = None
    warnings: List[str] = Field(default_factory=list)
