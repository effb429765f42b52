"""
サーバー実装
"""
