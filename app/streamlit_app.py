from __future__ import annotations

import streamlit as st

from whylab.config import load_settings, parse_key_list
from whylab.cipher import PipelineSpec, WhyCryptoError, build_pipeline, format_digest, validate_spec
from whylab.cipher.spec import SUPPORTED_HASHES
from whylab.evaluation import analyze_permutation, analyze_sbox, compute_digest_avalanche
from whylab.step_logger import StepLogger


st.set_page_config(page_title="Why Lab", layout="wide")

settings = load_settings()

st.title("Why Lab — ObfuscatedEncrypt pipeline")
st.caption("Research-only: hash, XOR, permutation, S-box, modpow, Feistel and AES-CBC, step by step.")

# ---------- Sidebar: pipeline settings ----------
st.sidebar.header("Pipeline settings")
profiles = ["standard", "dotnet"]
profile = st.sidebar.selectbox("Profile", profiles, index=profiles.index(settings.profile))
hashes = list(SUPPORTED_HASHES)
default_hash = settings.pipeline_spec().hash_name
hash_name = st.sidebar.selectbox(
    "Hash", hashes, index=hashes.index(default_hash) if default_hash in hashes else 0,
)
strict = st.sidebar.checkbox("Strict permutation", value=settings.strict_permutation)
formats = ["hex", "hyphen", "base64"]
display = st.sidebar.selectbox("Digest format", formats, index=formats.index(settings.display_format))

spec = PipelineSpec(profile=profile, hash_name=hash_name, strict_permutation=strict)
ok, errs = validate_spec(spec)
if not ok:
    for e in errs:
        st.sidebar.warning(e)

# ---------- Main: digest ----------
st.subheader("1) Digest")

colA, colB = st.columns(2)
with colA:
    data_text = st.text_input("Data (UTF-8)", value="Wh?")
with colB:
    key_text = st.text_input("Key bytes", value=",".join(str(b) for b in settings.default_key))

logger = StepLogger(record=True)
try:
    key = bytes(parse_key_list(key_text))
    trace = build_pipeline(spec, logger).trace(data_text.encode("utf-8"), key)
except (WhyCryptoError, ValueError) as exc:
    st.error(f"{type(exc).__name__}: {exc}")
    st.stop()

st.code(format_digest(trace.digest, display))

with st.expander("Stage trace"):
    st.json(trace.to_dict())

with st.expander("Step log"):
    for category, message in logger.steps:
        st.text(f"[{category}] {message}")

# ---------- Analysis ----------
st.subheader("2) Analysis")

if st.button("Analyze S-box"):
    st.text(analyze_sbox(constant=spec.sbox_constant).summary())

n = st.number_input("Permutation length", min_value=1, max_value=4096, value=spec.digest_size, step=1)
st.text(analyze_permutation(int(n)).summary())

trials = st.slider("Avalanche trials", min_value=10, max_value=500, value=100, step=10)
if st.button("Run avalanche"):
    for kind in ("data", "key"):
        st.text(compute_digest_avalanche(spec, input_type=kind, trials=trials, seed=settings.global_seed).summary())
