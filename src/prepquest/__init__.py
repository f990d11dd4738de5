"""
prepquest

면접 문제(question) / 문제은행(question_bank) 데이터 접근 레이어
"""
__version__ = "0.1.0"
