import streamlit as st
import sys
import os

# プロジェクトルートをパスに追加
sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from models.errors import ReservationError, NoDataForDate
from services import create_reservation_service
from utils import (
    get_config, setup_logging, get_logger, reservations_to_dataframe,
    generate_export_filename, MESSAGES
)
from utils.ui_components import (
    create_reservation_form, reset_form, create_view_date_input, display_availability,
    display_reservations_table, show_message, render_message, create_download_button
)

# ---------- 初期化 ----------
config = get_config()
setup_logging()
logger = get_logger(__name__)

st.set_page_config(page_title=config.app_name, page_icon="🏢", layout="wide")
st.title("🏢 System Rezerwacji Biurek")

service = create_reservation_service(config)


def notify(text: str, severity: str) -> None:
    show_message(text, severity, config.message_timeout_seconds)


render_message()

form_col, view_col = st.columns(2)

# ---------- 予約フォーム ----------
with form_col:
    action, request = create_reservation_form()

    if action == "reserve":
        try:
            service.submit(request)
        except ReservationError as e:
            notify(e.message, "error")
        else:
            notify(MESSAGES["reserved"], "success")
            reset_form()
        st.rerun()

    elif action == "cancel":
        try:
            service.cancel_or_raise(request.date, request.employee_name)
        except ReservationError as e:
            notify(e.message, "error")
        else:
            notify(MESSAGES["cancelled"], "success")
            reset_form()
        st.rerun()

# ---------- 予約一覧 ----------
with view_col:
    st.subheader("📋 Rezerwacje")
    view_date = create_view_date_input()

    if st.button("🔄 Odśwież dane"):
        try:
            service.repository.refresh()
        except ReservationError as e:
            notify(e.message, "error")
        else:
            notify(MESSAGES["refreshed"], "info")
        st.rerun()

    try:
        dataset = service.repository.load()
        display_availability(service.availability(view_date, dataset))
        rows = service.list_reservations(view_date, dataset)
        display_reservations_table(reservations_to_dataframe(rows, config.display_timezone))

        try:
            csv_text = service.export_day(view_date)
        except NoDataForDate as e:
            if st.button("📥 Eksport CSV"):
                notify(e.message, "error")
                st.rerun()
        else:
            if create_download_button(csv_text, generate_export_filename(view_date)):
                logger.info(f"CSVをエクスポートしました: {view_date}")
                notify(MESSAGES["exported"], "success")
                st.rerun()
    except ReservationError as e:
        logger.error(f"予約データを表示できません: {e.message}")
        st.error(e.message)
