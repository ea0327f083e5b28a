import pandas as pd
import requests
import streamlit as st

from diseasematch import config
from diseasematch.api_client import ApiClient, ApiError

st.set_page_config(page_title="DiseaseMatch", layout="wide", page_icon="🩺")
api = ApiClient(config.API_URL)

SEVERITY_CLR = {"low": "#28a745", "medium": "#ffc107", "high": "#fd7e14", "critical": "#dc3545"}

st.markdown("""<style>
    .dx-card { padding:12px;border-radius:8px;margin-bottom:8px;background:#f8f9fb;box-shadow:0 2px 4px #0002; }
    .dx-sev { padding:2px 8px;border-radius:6px;color:white;font-weight:bold;font-size:0.8em; }
</style>""", unsafe_allow_html=True)

for k in ["results", "user_id"]:
    if k not in st.session_state: st.session_state[k] = None

st.title("🩺 DiseaseMatch")
st.caption("Heuristic lexical matching against a fixed catalog. Not a diagnosis; consult a clinician.")

with st.sidebar:
    st.session_state.user_id = st.text_input("User", st.session_state.user_id or "anonymous")
    try:
        known = sorted({s for d in api.diseases() for s in d["symptoms"]})
        with st.expander("Known symptoms"): st.write(", ".join(known))
    except (ApiError, requests.RequestException) as e:
        st.warning(f"Catalog unavailable: {e}")

t1, t2 = st.tabs(["Predict", "History"])
with t1:
    c = st.columns(3)
    sy = [c[i].text_input(f"Symptom {i + 1}", key=f"s{i}") for i in range(3)]
    if st.button("Analyze"):
        if any(not s.strip() for s in sy):
            st.error("Please enter exactly 3 symptoms")
        else:
            try:
                st.session_state.results = api.predict(st.session_state.user_id, sy)["predictions"]
            except ApiError as e:
                st.error(e.detail)
            except requests.RequestException as e:
                st.error(f"Network error, please try again ({e})")

    res = st.session_state.results
    if res is not None:
        if not res: st.info("No catalog disease matched these symptoms.")
        for p in res:
            clr = SEVERITY_CLR.get(p["severity"], "#6c757d")
            st.markdown(
                f"<div class='dx-card'><b>{p['name']}</b> &nbsp;<span class='dx-sev' style='background:{clr}'>{p['severity']}</span>"
                f" &nbsp;{p['category']}<br>{p['description']}</div>", unsafe_allow_html=True)
            st.progress(p["confidence"] / 100, text=f"Confidence {p['confidence']}%")
            with st.expander("Details"):
                st.write("**Matched:** " + ", ".join(p["matchedSymptoms"]))
                st.write("**Causes:** " + ", ".join(p["causes"]))
                st.write("**Precautions:** " + ", ".join(p["precautions"]))
                st.write("**Medicines:** " + ", ".join(p["medicines"]))

with t2:
    try:
        hst = api.history(st.session_state.user_id)
        if hst:
            df = pd.DataFrame([{
                "Date": h["timestamp"], "Symptoms": ", ".join(h["symptoms"]),
                "Top": h["predictions"][0]["name"] if h["predictions"] else "-",
                "Confidence": h["confidence"],
            } for h in hst])
            st.dataframe(df, use_container_width=True)
        else: st.caption("No predictions yet.")
    except (ApiError, requests.RequestException) as e:
        st.error(f"History unavailable: {e}")
