from pydantic import BaseModel, Field, model_validator
from typing import Optional


class ScanInput(BaseModel):
    text: str
    forbidden: list[str] = []


class ScanResult(BaseModel):
    is_safe: bool = True
    matches: list[str] = []

    @model_validator(mode="after")
    def check_safe_matches(self):
        if self.is_safe != (not self.matches):
            raise ValueError("is_safe must be true exactly when matches is empty")
        return self

    def as_pair(self) -> tuple[bool, list[str]]:
        return self.is_safe, list(self.matches)


class Policy(BaseModel):
    name: str = Field(min_length=1)
    block_patterns: list[str] = []


class ScanRequest(BaseModel):
    text: str
    forbidden: Optional[list[str]] = None
    policy: Optional[str] = None


class BatchScanRequest(BaseModel):
    items: list[ScanRequest] = []


class BatchScanResult(BaseModel):
    results: list[ScanResult] = []


class PathScanRequest(BaseModel):
    path: str = "."
    forbidden: Optional[list[str]] = None
    policy: Optional[str] = None


class FileFinding(BaseModel):
    path: str
    matches: list[str]


class RepoScanResult(BaseModel):
    is_safe: bool = True
    files_scanned: int = 0
    findings: list[FileFinding] = []
