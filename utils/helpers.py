import random


def generate_player_pairs(player_ids, rng=random):
    """
    Build a rotation of askers and responders: {asker_id: responder_id}.

    The shuffled ids are read cyclically, each player asking the next one and the
    last one asking the first. Every id shows up once on each side, and nobody is
    paired with themselves unless they are the only player.
    """
    order = sorted(player_ids)
    rng.shuffle(order)
    if not order:
        return {}

    pairs = {}
    asker = order[-1]
    for responder in order:
        pairs[asker] = responder
        asker = responder
    return pairs
