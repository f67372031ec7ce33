"""테스트 자산 (고정 HTML/JSON 페이로드)"""
