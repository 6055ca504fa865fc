"""
Goose Quotes Backend: Services Layer
=====================================

What:  Business logic between routes (HTTP) and the database.

Service Inventory:
    - GooseService: queries and updates on the geese table
    - GenerationService: prompts + LLM calls for quotes, bios and images
    - LLMService (abstract): provider interface
    - OpenAIService / GeminiService: concrete providers
    - get_llm_service: picks the provider named by LLM_PROVIDER
"""
