from pydantic import BaseModel


class PreviewQuestion(BaseModel):
    question: str
    avgRating: float
    responseCount: int


class PreviewAnalytics(BaseModel):
    totalResponses: int
    anonymousResponses: int
    responseRate: int
    avgPerformanceRating: str
    insights: list[str]
    questionAnalysis: list[PreviewQuestion]
