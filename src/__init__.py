"""학교 검색 API 패키지"""

__version__ = "1.0.0"
