# unserialize_tool/adapters/__init__.py

"""Adapters exposing the decoder to callers"""
