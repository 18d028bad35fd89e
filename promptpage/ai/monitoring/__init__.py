"""
Monitoring Module - structured logging for generation requests.

Usage:
    from promptpage.ai.monitoring import ai_logger

    ai_logger.log_request(request_id, prompt, provider, model)
"""

from promptpage.ai.monitoring.logger import AILogger, ai_logger

__all__ = ["AILogger", "ai_logger"]
