#setup: python -m venv .venv
#setup: source .venv/bin/activate   # (windows: .venv\Scripts\activate)
#setup: pip install -U pip -e ".[test]"
#setup: flask --app unicost.wsgi run --port 5000 --debug

from __future__ import annotations

from unicost.app import create_app

app = create_app()


if __name__ == "__main__":
    app.run(port=5000, debug=True)
