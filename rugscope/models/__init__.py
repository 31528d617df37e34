from rugscope.models.token import AnalysisResult, Holder, TokenData, TokenInfo, Transaction

__all__ = [
    "TokenInfo",
    "Holder",
    "Transaction",
    "TokenData",
    "AnalysisResult",
]
