"""
AI Module - prompt-to-code generation.

Layers:
- providers: clients for LLM text-generation APIs
- codegen: system prompt, code block extraction, request orchestration
- monitoring: structured logging of generation requests
- errors: exception taxonomy shared by all layers
"""
