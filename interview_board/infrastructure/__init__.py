"""Infrastructure - storage backends and LLM clients."""
