"""
Food Advice proxy package.

Provides:
- A FastAPI endpoint that asks a hosted chat-completion model for short cooking tips
- Prompt strategies and optional cleanup of reasoning preambles
- A one-shot command-line client
"""
