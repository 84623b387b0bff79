#!/usr/bin/env python3
"""
Startup script for the PaperPal backend
"""

# SPDX-License-Identifier: AGPL-3.0-only

import sys
from urllib.parse import urlsplit

import requests

from app import app
from common.config import get_settings


def check_completion_endpoint(url: str) -> bool:
    """Check that the chat-completion host answers at all (no credential needed)."""
    parts = urlsplit(url)
    base = f"{parts.scheme}://{parts.netloc}"
    try:
        response = requests.get(base, timeout=5)
        print(f"✅ Completion host {parts.netloc} is reachable (HTTP {response.status_code})")
        return True
    except requests.exceptions.RequestException as e:
        print(f"❌ Completion host {parts.netloc} is not reachable: {e}")
        return False


def main():
    settings = get_settings()

    print("🚀 Starting PaperPal Backend...")
    print("=" * 50)
    print(f"🤖 Model: {settings.llm_model}")
    print(f"🔗 Endpoint: {settings.llm_base_url}")

    if not check_completion_endpoint(settings.llm_base_url):
        print("\n⚠️  Generation requests will return placeholder content until the endpoint is reachable.")

    print("\n" + "=" * 50)
    print("🌐 Starting Flask server...")
    print("📖 Health check: http://localhost:8000/health")
    print("=" * 50)

    try:
        app.run(host="0.0.0.0", port=8000, debug=True)
    except KeyboardInterrupt:
        print("\n🛑 Server stopped by user.")
    except Exception as e:
        print(f"\n❌ Error starting server: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
