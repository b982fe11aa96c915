from pydantic import BaseModel, Field


class ProjectRules(BaseModel):
    slug: str
    rules_version: str

class DocumentRules(BaseModel):
    max_json_bytes: int = Field(default=400_000, gt=0)
    log_rejections: bool = True

class Rules(BaseModel):
    project: ProjectRules
    documents: DocumentRules = Field(default_factory=DocumentRules)
