"""
UIコンポーネントモジュール

Streamlitアプリケーションで使用する共通UIコンポーネントを提供します。
"""

import time
import streamlit as st
import pandas as pd
from datetime import date
from typing import Optional, Tuple

from models.reservation_models import Availability, ReservationRequest, Shift, WorkMode
from .constants import SHIFT_LABELS, WORK_MODE_LABELS, MESSAGES, MESSAGE_TIMEOUT_SECONDS

MESSAGE_STATE_KEY = "flash_message"
FORM_VERSION_KEY = "form_version"


def create_reservation_form() -> Tuple[Optional[str], ReservationRequest]:
    """
    予約フォームを作成

    勤務形態がリモートの場合はシフト選択を表示しません。

    Returns:
        (操作, 入力値)のタプル。操作は "reserve" / "cancel"、ボタンが押されていなければNone
    """
    st.subheader("📝 Nowa rezerwacja")
    version = st.session_state.get(FORM_VERSION_KEY, 0)

    selected_date = st.date_input("Data", value=date.today(), key=f"date_{version}")
    work_mode = st.radio(
        "Tryb pracy",
        list(WorkMode),
        format_func=lambda m: WORK_MODE_LABELS[m.value],
        horizontal=True,
        key=f"work_mode_{version}",
    )

    shift = None
    if work_mode is WorkMode.OFFICE:
        shift = st.radio(
            "Zmiana",
            list(Shift),
            format_func=lambda s: SHIFT_LABELS[s.value],
            index=None,
            key=f"shift_{version}",
        )

    employee_name = st.text_input("Imię i nazwisko", key=f"employee_name_{version}")

    request = ReservationRequest(
        date=selected_date,
        work_mode=work_mode,
        employee_name=employee_name,
        shift=shift,
    )

    c1, c2 = st.columns(2)
    if c1.button("✅ Zarezerwuj", use_container_width=True):
        return "reserve", request
    if c2.button("❌ Anuluj rezerwację", use_container_width=True):
        return "cancel", request
    return None, request


def reset_form() -> None:
    """フォームと表示日をリセット（ウィジェットのキーを切り替えて初期値に戻す）"""
    st.session_state[FORM_VERSION_KEY] = st.session_state.get(FORM_VERSION_KEY, 0) + 1


def view_date_key() -> str:
    """表示日ウィジェットのキー（reset_formで切り替わる）"""
    return f"view_date_{st.session_state.get(FORM_VERSION_KEY, 0)}"


def create_view_date_input() -> date:
    """表示日の入力欄を作成（初期値は今日）"""
    return st.date_input("Podgląd dnia", value=date.today(), key=view_date_key())


def display_availability(availability: Availability) -> None:
    """
    空き枠数を表示

    Args:
        availability: 指定日の空き枠数
    """
    c1, c2 = st.columns(2)
    c1.metric(SHIFT_LABELS[Shift.MORNING.value],
              f"{availability.morning_free}/{availability.morning_limit}")
    c2.metric(SHIFT_LABELS[Shift.AFTERNOON.value],
              f"{availability.afternoon_free}/{availability.afternoon_limit}")


def display_reservations_table(df: pd.DataFrame) -> None:
    """予約一覧を表示（予約がなければ案内を表示）"""
    if df.empty:
        st.info(MESSAGES["no_reservations"])
        return
    st.dataframe(df, use_container_width=True, hide_index=True)


def show_message(text: str, severity: str = "info",
                 timeout_seconds: float = MESSAGE_TIMEOUT_SECONDS) -> None:
    """
    一時メッセージを登録

    メッセージは次回以降の描画で表示され、timeout_seconds経過後に非表示になります。

    Args:
        text: メッセージ本文
        severity: success / error / info
        timeout_seconds: 表示時間（秒）
    """
    st.session_state[MESSAGE_STATE_KEY] = {
        "text": text,
        "severity": severity,
        "expires_at": time.monotonic() + timeout_seconds,
    }


def render_message() -> None:
    """登録済みの一時メッセージを表示（期限切れなら削除）"""
    message = st.session_state.get(MESSAGE_STATE_KEY)
    if not message:
        return
    if time.monotonic() >= message["expires_at"]:
        del st.session_state[MESSAGE_STATE_KEY]
        return

    render = {"success": st.success, "error": st.error}.get(message["severity"], st.info)
    render(message["text"])


def create_download_button(csv_text: str, filename: str, button_text: str = "📥 Eksport CSV") -> bool:
    """
    CSVダウンロードボタンを作成

    Args:
        csv_text: ダウンロードするCSV文字列
        filename: ファイル名
        button_text: ボタンのテキスト

    Returns:
        ボタンが押された場合True
    """
    return st.download_button(
        button_text,
        csv_text.encode("utf-8"),
        file_name=filename,
        mime="text/csv",
    )
