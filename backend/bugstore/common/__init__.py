from bugstore.common.result import ErrorCode, PagedResult, Result

__all__ = ['ErrorCode', 'PagedResult', 'Result']
