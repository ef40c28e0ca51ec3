"""Core domain package for bulletin.

Core contains the announcement models, the similarity engine and the service
layer without any storage or UI specific code, keeping the business logic
portable.
"""
