"""
Adapters
ポートの具体的な実装
"""
