import numpy as np

def search_sequence_numpy(data, seq):
    """
    Positions où la sous-séquence seq apparaît dans data.
    Version 100% NumPy : une ligne d'indices par fenêtre candidate.
    """
    if seq.size > data.size:
        return np.empty(0, dtype=np.intp)

    seq_ind = np.arange(seq.size)
    cor_size = data.size - seq.size + 1
    data_ind = np.arange(cor_size).reshape((cor_size, 1))

    return np.nonzero(np.all(data[data_ind + seq_ind] == seq, axis=1))[0]


def count_sequence_numpy(data, seq):
    return int(search_sequence_numpy(data, seq).size)
