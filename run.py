import os
import sys


def main() -> None:
    port = os.getenv("PORT", "8501")
    os.environ["STREAMLIT_SERVER_PORT"] = port
    os.environ["STREAMLIT_SERVER_ADDRESS"] = "0.0.0.0"
    os.environ["STREAMLIT_BROWSER_GATHER_USAGE_STATS"] = "false"
    os.environ.setdefault("STREAMLIT_THEME_BASE", "dark")

    from streamlit.web import cli as stcli

    sys.argv = ["streamlit", "run", os.path.join(os.path.dirname(os.path.abspath(__file__)), "app.py")]
    stcli.main()


if __name__ == "__main__":
    main()
