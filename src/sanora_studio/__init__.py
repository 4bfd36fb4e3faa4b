"""
SANORA Studio copy-drafting package.

Provides:
- GenerationClient: remote text generation with bounded exponential backoff
- Copywriting call sites for design concepts, project blurbs and service copy
- FastAPI service and CLI on top of the call sites
"""
