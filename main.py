#!/usr/bin/env python3
"""
デスク予約システム - メインエントリーポイント

このファイルは、アプリケーションを起動するためのメインエントリーポイントです。
"""

import sys
import os

# プロジェクトルートをパスに追加
sys.path.append(os.path.join(os.path.dirname(__file__), 'src'))


def main() -> int:
    import streamlit.web.cli as stcli
    from utils.config import get_config

    config = get_config()
    app_path = os.path.join(os.path.dirname(os.path.abspath(__file__)),
                            "src", "app", "streamlit_reservation_app.py")

    if not os.path.exists(app_path):
        print(f"❌ エラー: アプリケーションファイルが見つかりません: {app_path}")
        return 1

    print("🚀 デスク予約システムを起動中...")
    print(f"📁 アプリケーションパス: {app_path}")
    print(f"🌐 ブラウザで http://localhost:{config.streamlit_server_port} にアクセスしてください")

    sys.argv = [
        "streamlit", "run", app_path,
        f"--server.port={config.streamlit_server_port}",
        f"--server.address={config.streamlit_server_address}",
    ]
    return stcli.main()


if __name__ == "__main__":
    sys.exit(main())
