"""
ポートフォリオサイト用チェッカー
"""
