# streamlit_app.py
import os
import requests
import streamlit as st

st.set_page_config(page_title="BookMind", layout="centered")

API_URL = os.getenv("API_URL", "http://127.0.0.1:8000")

# ---------- HTTP helpers ----------
def api_get(path, **params):
    try:
        r = requests.get(f"{API_URL}{path}", params=params, timeout=20)
        r.raise_for_status()
        return r.json(), None
    except requests.exceptions.RequestException as e:
        return None, e

def api_post(path, body):
    try:
        r = requests.post(f"{API_URL}{path}", json=body, timeout=60)
        r.raise_for_status()
        return r.json(), None
    except requests.exceptions.RequestException as e:
        return None, e

def backend_ok():
    try:
        requests.get(f"{API_URL}/openapi.json", timeout=3)
        return True
    except requests.exceptions.RequestException:
        return False

def error_detail(err):
    resp = getattr(err, "response", None)
    if resp is not None:
        try:
            return resp.json().get("detail") or str(err)
        except ValueError:
            pass
    return str(err)

def render_bookmark(item):
    b = item["bookmark"]
    meta = []
    if item.get("score") is not None:
        meta.append(f"score {item['score']}")
    if item.get("collection"):
        meta.append(item["collection"])
    if b.get("tags"):
        meta.append(" ".join(f"#{t}" for t in b["tags"]))
    st.markdown(f"- [{b['title'] or b['url']}]({b['url']})" + (f"  \n  _{' · '.join(meta)}_" if meta else ""))
    if b.get("excerpt"):
        st.caption(b["excerpt"][:200])

# ------------ Backend status ------------
st.caption(f"Backend: {'✅ connected' if backend_ok() else '❌ offline'} · API_URL={API_URL}")

for k, v in {"suggested_tags": []}.items():
    st.session_state.setdefault(k, v)

st.markdown("## BookMind")
st.caption("Ask your bookmarks a question 🔖")

ai_tab, plain_tab, add_tab, summary_tab = st.tabs(["AI search", "Search", "Add bookmark", "Summarize"])

# ---------- AI search ----------
with ai_tab:
    with st.form("ai_search_form"):
        query = st.text_input("What are you looking for?", placeholder="e.g., articles about machine learning")
        submit_ai = st.form_submit_button("Search with AI", use_container_width=True)
    if submit_ai:
        data, err = api_post("/ai-search", {"query": query})
        if err:
            st.error("AI search failed to reach the server.")
            st.caption(error_detail(err))
        elif data["outcome"] == "matched":
            for item in data["results"]:
                render_bookmark(item)
            if data.get("explanation"):
                st.info(f"🤖 {data['explanation']}")
        elif data["outcome"] == "no_matches":
            st.info(data["message"])
        elif data["outcome"] == "empty_query":
            st.markdown(data["message"].replace("\n", "  \n"))
        else:
            st.warning(data["message"])

# ---------- Plain search ----------
with plain_tab:
    with st.form("search_form"):
        q = st.text_input("Keywords")
        submit_search = st.form_submit_button("Search", use_container_width=True)
    if submit_search:
        if not q.strip():
            st.warning("Type something to search 🔎")
        else:
            data, err = api_get("/search", q=q)
            if err:
                st.error("Search failed.")
                st.caption(error_detail(err))
            elif not data.get("results"):
                st.info("No bookmarks match those keywords.")
            else:
                for item in data["results"]:
                    render_bookmark(item)

# ---------- Add bookmark ----------
with add_tab:
    title = st.text_input("Title", key="new_title")
    url = st.text_input("URL", key="new_url")
    excerpt = st.text_area("Description", height=80, key="new_excerpt")

    if st.button("Suggest tags", use_container_width=True):
        data, err = api_post("/suggest-tags", {"title": title, "excerpt": excerpt, "url": url})
        if err:
            st.error("Tag suggestion failed.")
            st.caption(error_detail(err))
        else:
            st.session_state.suggested_tags = data.get("tags", [])

    tags_text = st.text_input("Tags (comma separated)", value=", ".join(st.session_state.suggested_tags))

    if st.button("Save bookmark", use_container_width=True):
        tags = [t.strip() for t in tags_text.split(",") if t.strip()]
        data, err = api_post("/bookmarks", {"title": title, "url": url, "excerpt": excerpt or None, "tags": tags})
        if err:
            st.error("Couldn’t save right now. Is the server running?")
            st.caption(error_detail(err))
        else:
            st.success(f"Saved “{data['bookmark']['title']}”.")
            st.session_state.suggested_tags = []

# ---------- Summarize ----------
with summary_tab:
    with st.form("summary_form"):
        summary_url = st.text_input("Page URL")
        submit_summary = st.form_submit_button("Summarize", use_container_width=True)
    if submit_summary:
        data, err = api_post("/summarize", {"url": summary_url})
        if err:
            st.error("Summary failed.")
            st.caption(error_detail(err))
        else:
            st.write(data["summary"])
