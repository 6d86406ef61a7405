"""
설정, 데이터 검증, 예외 유틸리티
"""
