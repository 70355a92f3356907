"""工具模块"""
