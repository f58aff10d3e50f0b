"""
Run ollama-acp from the command line.

Usage:
    python -m ollama_acp process '{"prompt": "Hi"}'
"""

from ollama_acp.cli import main

if __name__ == "__main__":
    main()
