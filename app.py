import os
import sys
import time
import ast
import io
import cProfile
import pstats
import inspect

import numpy as np
import pandas as pd
import streamlit as st
import plotly.express as px

# ----------------------------------------------------------------------
# CONFIG STREAMLIT + STYLE GLOBAL
# ----------------------------------------------------------------------
st.set_page_config(
    page_title="Pattern matching ADN – Brute Force & Karp-Rabin",
    layout="wide"
)

st.markdown(
    """
    <style>
    .big-title {
        font-size: 2.4rem;
        font-weight: 800;
        margin-bottom: 0.2rem;
    }
    .subtitle {
        font-size: 1.05rem;
        color: #555;
        margin-bottom: 0.8rem;
    }
    .section-title {
        font-size: 1.4rem;
        font-weight: 700;
        margin-top: 0.5rem;
        margin-bottom: 0.2rem;
    }
    .subsection {
        font-weight: 600;
        margin-top: 0.4rem;
        margin-bottom: 0.1rem;
    }
    </style>
    """,
    unsafe_allow_html=True,
)

# ----------------------------------------------------------------------
# IMPORTS LOCAUX (dossier src/)
# ----------------------------------------------------------------------
ROOT = os.path.dirname(os.path.abspath(__file__))
SRC = os.path.join(ROOT, "src")

if SRC not in sys.path:
    sys.path.append(SRC)

from rolling_hash import DEFAULT_MOD, window_hashes
from search_sequence import search_sequence_numpy
from search_sequence_hash import hashed_search, hashed_search_stats
from search_sequence_numba import exact_search_numba, hashed_search_numba
from search_sequence_numba_parallel import exact_search_numba_parallel
from search_sequence_simple import exact_search
from sequence_io import ALPHABET, sanitize, to_codes


# ----------------------------------------------------------------------
# OUTILS GÉNÉRIQUES : BENCHMARK, AST, PROFILING, SOURCE
# ----------------------------------------------------------------------
def bench(fn, *args, warmup=1, repeat=5):
    """Mesure le meilleur temps d'exécution d'une fonction."""
    for _ in range(warmup):
        fn(*args)

    best = float("inf")
    for _ in range(repeat):
        t0 = time.perf_counter()
        fn(*args)
        dt = time.perf_counter() - t0
        if dt < best:
            best = dt
    return best


def analyze_file(path):
    """Analyse statique basique : lignes, boucles, if, appels."""
    full = os.path.join(ROOT, path)
    with open(full, "r", encoding="utf-8") as f:
        src = f.read()

    tree = ast.parse(src)

    class Analyzer(ast.NodeVisitor):
        def __init__(self):
            self.loop_count = 0
            self.if_count = 0
            self.call_count = 0
            self.length = len(src.splitlines())

        def visit_For(self, node):
            self.loop_count += 1
            self.generic_visit(node)

        def visit_While(self, node):
            self.loop_count += 1
            self.generic_visit(node)

        def visit_If(self, node):
            self.if_count += 1
            self.generic_visit(node)

        def visit_Call(self, node):
            self.call_count += 1
            self.generic_visit(node)

    a = Analyzer()
    a.visit(tree)
    return a


def get_source(obj):
    """Récupère le code source d'une fonction pour l'afficher."""
    try:
        return inspect.getsource(obj)
    except OSError:
        return "# Source non disponible pour cet objet."


def random_dna(n, seed=None):
    rng = np.random.default_rng(seed)
    return "".join(rng.choice(list(ALPHABET), size=n))


def profile_search(fn, text, pattern):
    pr = cProfile.Profile()
    pr.enable()
    fn(text, len(text), pattern, len(pattern))
    pr.disable()

    s = io.StringIO()
    ps = pstats.Stats(pr, stream=s).sort_stats("cumtime")
    ps.print_stats(10)
    return s.getvalue()


# ----------------------------------------------------------------------
# EN-TÊTE GLOBAL
# ----------------------------------------------------------------------
st.markdown('<div class="big-title">Pattern matching ADN</div>', unsafe_allow_html=True)
st.markdown(
    '<div class="subtitle">'
    'Comptage des occurrences d’un motif dans une séquence ADN : '
    'force brute et Karp-Rabin (empreinte glissante en base 2), '
    'en Python pur puis compilés avec Numba.'
    '</div>',
    unsafe_allow_html=True,
)

st.write("")

tab1, tab2, tab3 = st.tabs([
    "🔎 Brute Force vs Karp-Rabin",
    "#️⃣ Empreintes & collisions",
    "🧭 Synthèse",
])


# ----------------------------------------------------------------------
# TAB 1 — LES DEUX ALGORITHMES
# ----------------------------------------------------------------------
with tab1:
    st.markdown('<div class="section-title">Force brute et Karp-Rabin</div>', unsafe_allow_html=True)

    col_c1, col_c2 = st.columns(2)
    with col_c1:
        st.write("**Force brute (Python)**")
        st.code(get_source(exact_search), language="python")
    with col_c2:
        st.write("**Karp-Rabin (Python)**")
        st.code(get_source(hashed_search_stats), language="python")

    st.write("---")
    st.markdown('<div class="subsection">Analyse statique (AST)</div>', unsafe_allow_html=True)

    files_seq = [
        "src/search_sequence_simple.py",
        "src/rolling_hash.py",
        "src/search_sequence_hash.py",
        "src/search_sequence_numba.py",
        "src/search_sequence_numba_parallel.py",
    ]
    rows = []
    for path in files_seq:
        a = analyze_file(path)
        rows.append({
            "Fichier": os.path.basename(path),
            "Lignes": a.length,
            "Boucles": a.loop_count,
            "If": a.if_count,
            "Appels de fonction": a.call_count,
        })
    st.dataframe(pd.DataFrame(rows), use_container_width=True)

    st.write("---")
    st.markdown('<div class="subsection">Recherche sur une séquence saisie</div>', unsafe_allow_html=True)

    col_i1, col_i2 = st.columns(2)
    with col_i1:
        text_in = sanitize(st.text_input("Séquence ADN", "ATCGATCGATCG"))
    with col_i2:
        pattern_in = sanitize(st.text_input("Motif", "ATCG"))

    if not pattern_in:
        st.warning("Le motif est vide.")
    else:
        n_bf = exact_search(text_in, len(text_in), pattern_in, len(pattern_in))
        n_kr = hashed_search(text_in, len(text_in), pattern_in, len(pattern_in))
        positions = search_sequence_numpy(to_codes(text_in), to_codes(pattern_in))
        c1, c2, c3 = st.columns(3)
        c1.metric("Brute Force", n_bf)
        c2.metric("Karp-Rabin", n_kr)
        c3.metric("Positions", ", ".join(str(p) for p in positions) or "—")

    st.write("---")
    st.markdown('<div class="subsection">Profiling (cProfile) des versions Python</div>', unsafe_allow_html=True)
    if st.button("Profiler les deux algorithmes"):
        text = random_dna(100_000)
        st.text(profile_search(exact_search, text, "ACGTTGCA"))
        st.text(profile_search(hashed_search, text, "ACGTTGCA"))

    st.write("---")
    st.markdown('<div class="subsection">Benchmarks & parité</div>', unsafe_allow_html=True)

    n = st.slider("Taille de la séquence", 10_000, 2_000_000, 200_000, step=10_000)
    m = st.slider("Longueur du motif", 1, 64, 8)

    col_b1, col_b2 = st.columns(2)
    with col_b1:
        if st.button("Tester la parité"):
            text = random_dna(5_000)
            pattern = text[100:100 + m]
            codes, pcodes = to_codes(text), to_codes(pattern)
            counts = {
                "Brute Force": exact_search(text, len(text), pattern, len(pattern)),
                "Karp-Rabin": hashed_search(text, len(text), pattern, len(pattern)),
                "NumPy": int(search_sequence_numpy(codes, pcodes).size),
                "BF Numba": exact_search_numba(codes, pcodes),
                "KR Numba": hashed_search_numba(codes, pcodes),
                "BF Numba parallèle": exact_search_numba_parallel(codes, pcodes),
            }
            if len(set(counts.values())) == 1:
                st.success(f"Parité OK : {counts['Brute Force']} occurrences pour toutes les versions.")
            else:
                st.error("Parité NON vérifiée !")
                st.write(counts)

    with col_b2:
        if st.button("Lancer les benchmarks"):
            text = random_dna(n)
            pattern = random_dna(m)
            codes, pcodes = to_codes(text), to_codes(pattern)

            times = {
                "BF Python": bench(exact_search, text, n, pattern, m, repeat=2),
                "KR Python": bench(hashed_search, text, n, pattern, m, repeat=2),
                "BF Numba": bench(exact_search_numba, codes, pcodes),
                "KR Numba": bench(hashed_search_numba, codes, pcodes),
                "BF Numba parallèle": bench(exact_search_numba_parallel, codes, pcodes),
            }
            st.session_state["times"] = times

            df = pd.DataFrame({
                "Version": list(times),
                "Temps (s)": list(times.values()),
            })
            fig = px.bar(df, x="Version", y="Temps (s)",
                         title="Temps d'exécution – recherche de motif")
            st.plotly_chart(fig, use_container_width=True)


# ----------------------------------------------------------------------
# TAB 2 — EMPREINTES & COLLISIONS
# ----------------------------------------------------------------------
with tab2:
    st.markdown('<div class="section-title">Empreinte glissante</div>', unsafe_allow_html=True)
    st.write(
        "Chaque fenêtre est lue comme un nombre en base 2 dont les chiffres sont les codes ASCII. "
        "Avec M = 2^31 - 1, 2^31 ≡ 1 (mod M) : les poids reviennent tous les 31 caractères, "
        "d'où des collisions faciles à construire pour les motifs de plus de 31 bases."
    )

    mod = st.number_input("Module M", min_value=2, value=DEFAULT_MOD, step=1)
    length = st.slider("Longueur du motif (collisions)", 1, 80, 32)
    size = st.slider("Taille du texte (collisions)", 1_000, 200_000, 50_000, step=1_000)

    if st.button("Compter les collisions"):
        text = random_dna(size, seed=0)
        pattern = random_dna(length, seed=1)
        stats = hashed_search_stats(text, len(text), pattern, len(pattern), int(mod))
        c1, c2, c3 = st.columns(3)
        c1.metric("Occurrences", stats.matches)
        c2.metric("Empreintes égales", stats.candidates)
        c3.metric("Collisions rejetées", stats.collisions)

        hashes = window_hashes(text[:2_000], length, int(mod))
        if hashes:
            fig = px.histogram(pd.DataFrame({"empreinte": hashes}), x="empreinte", nbins=50,
                               title="Distribution des empreintes (2000 premières bases)")
            st.plotly_chart(fig, use_container_width=True)


# ----------------------------------------------------------------------
# TAB 3 — SYNTHÈSE
# ----------------------------------------------------------------------
with tab3:
    st.markdown('<div class="section-title">Synthèse</div>', unsafe_allow_html=True)
    times = st.session_state.get("times")
    if times is None:
        st.info("Lancer d'abord les benchmarks dans le premier onglet.")
    else:
        ref = times["BF Python"]
        df = pd.DataFrame({
            "Version": list(times),
            "Temps (s)": list(times.values()),
            "Speedup vs BF Python": [ref / t if t > 0 else float("inf") for t in times.values()],
        })
        st.dataframe(df, use_container_width=True)
        fig = px.bar(df, x="Version", y="Speedup vs BF Python", title="Speedup")
        st.plotly_chart(fig, use_container_width=True)
