import asyncio
import streamlit as st
import pandas as pd

from app.core.errors import BookingStoreError
from app.services.admin_service import admin_service
from app.services.db_service import db_service

# Page Config
st.set_page_config(
    page_title="Open Door Admin",
    page_icon="📅",
    layout="wide"
)

# Header
st.title("Open Door Professionals - Booking Dashboard")


def run(coro):
    # Fresh client per loop, the async Supabase client is bound to the loop that created it
    db_service._client = None
    return asyncio.run(coro)


def load_data():
    try:
        bookings = run(admin_service.list_bookings())
    except BookingStoreError as e:
        st.error(f"Failed to load bookings: {e}")
        return None
    return bookings


# Load Data
if st.button("Refresh"):
    st.rerun()

bookings = load_data()

if bookings:
    summary = admin_service.summarize(bookings)

    col1, col2, col3 = st.columns(3)
    col1.metric("Total Bookings", summary["total"])
    col2.metric("Pending", summary["pending"])
    col3.metric("Confirmed", summary["confirmed"])

    # Data Table
    st.subheader("Bookings")
    df = pd.DataFrame(bookings)
    st.dataframe(
        df,
        use_container_width=True,
        column_config={
            "created_at": st.column_config.DatetimeColumn("Submitted", format="MMM D, YYYY HH:mm"),
            "name": "Name",
            "email": "Email",
            "phone": "Phone",
            "service_type": "Service",
            "preferred_date": "Date",
            "preferred_time": "Time",
            "status": "Status",
            "id": None
        }
    )

    # Triage
    st.subheader("Update Status")
    for booking in bookings:
        actions = admin_service.allowed_transitions(booking.get("status"))
        if not actions:
            continue
        cols = st.columns([4] + [1] * len(actions))
        cols[0].write(f"**{booking.get('name')}** · {booking.get('service_type')} · {booking.get('preferred_date')} · _{booking.get('status')}_")
        for col, status in zip(cols[1:], actions):
            if col.button(status.value.capitalize(), key=f"{booking['id']}-{status.value}"):
                try:
                    run(admin_service.set_status(booking["id"], status))
                    st.success(f"Booking {status.value} successfully")
                    st.rerun()
                except BookingStoreError as e:
                    st.error(f"Failed to update booking status: {e}")
else:
    st.info("No bookings yet.")

# Footer
st.markdown("---")
st.caption("Open Door Professionals • Booking Admin")
