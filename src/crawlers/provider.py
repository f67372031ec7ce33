"""Provider Protocol - Interface for search providers

API 키 기반 제공자와 HTML 스크래핑 제공자가 공통으로 구현하는 인터페이스입니다.
오케스트레이터는 구현 방식(API/스크래핑)을 알지 못합니다.
"""

from typing import List, Literal, Protocol

from src.engine.result import SearchResultItem


ProviderKind = Literal["api", "scrape"]


class SearchProvider(Protocol):
    """검색 제공자 프로토콜

    구현 예시:
        class MyProvider:
            name = "my"
            kind = "scrape"

            def is_configured(self) -> bool:
                return True

            async def search(self, query: str, top_k: int) -> List[SearchResultItem]:
                ...
    """

    name: str
    kind: ProviderKind

    def is_configured(self) -> bool:
        """자격 증명 등 로컬 전제 조건 충족 여부 (네트워크 호출 없음)"""
        ...

    async def search(self, query: str, top_k: int) -> List[SearchResultItem]:
        """검색 실행

        Args:
            query: 부스팅이 적용된 최종 검색어
            top_k: 최대 결과 수

        Returns:
            최대 top_k개의 정규화된 결과

        Raises:
            MissingCredentialException: 자격 증명 없음 (네트워크 호출 전)
            ProviderHTTPException: 2xx가 아닌 응답
            NetworkTimeoutException: 타임아웃
            ProviderRequestException: 전송 오류
            ParsingException: 응답 파싱 오류
        """
        ...
