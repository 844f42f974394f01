# unserialize_tool/application/__init__.py

"""Application layer: parsing and binding"""
