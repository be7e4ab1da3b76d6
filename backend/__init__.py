"""
MaxJobOffers Backend.

Core components:
- ai: Prompt library, generation invoker, result validation and mock fallback
- services: Interviews, guides, LinkedIn, résumés, financial plans, jobs, credits
- tools: PDF parser, Google Jobs search
- api: FastAPI routes
"""
