"""
チェッカー API パッケージ
"""
