# simple script to derive an ML-DSA keypair from a 24-word mnemonic
# for testing purposes only. Do not use in production.

import hashlib
import logging
import sys

from mldsa_bip39 import derive_default_keypair, generate_mnemonic, get_settings, mnemonic_to_seed
from mldsa_bip39.memory import wipe


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    logging.basicConfig(level=logging.INFO)

    # 24-word mnemonic → 256 bits of entropy
    words = " ".join(argv) if argv else generate_mnemonic(strength=256)
    seed = mnemonic_to_seed(words)  # 64 bytes

    # Derive ML-DSA key from seed at m/<purpose>'/<coin>'/0'/0/0
    try:
        keypair = derive_default_keypair(seed)
    finally:
        wipe(seed)

    with keypair:
        print("mnemonic:", words)
        print("level:", keypair.level)
        print("path:", keypair.derivation_path(get_settings().DEFAULT_COIN_TYPE, 0, 0))
        print("public_key_sha256:", hashlib.sha256(keypair.public_key).hexdigest())
        print("public_key_hex:", keypair.public_key.hex())
    return 0


if __name__ == "__main__":
    sys.exit(main())
