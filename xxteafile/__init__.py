"""
XXTEAFILE - XXTEA file encryption in independent 512-byte blocks

Files are cut into 512-byte units, each unit is enciphered on its own with
XXTEA (128 little-endian 32-bit words, 6 rounds) and a 128-bit key read from a
text file holding exactly 32 hexadecimal characters. The last short unit is
padded with ASCII '0'; decryption keeps that padding and drops any trailing
partial unit.
"""

from .main import *
from .api_files import decrypt_file, encrypt_file, generate_key_file, run
from .version import __version__

# ============================================================================
# KEY HELPERS
# ============================================================================

def load_key(path): return xxteafile.load_key(path)
def parse_key(text): return xxteafile.parse_key(text)
def key_to_hex(key): return xxteafile.key_to_hex(key)

# ============================================================================
# BLOCK AND BYTES FUNCTIONS
# ============================================================================

def encrypt_block(block, key): return xxteafile.encrypt_block(block, key)
def decrypt_block(block, key): return xxteafile.decrypt_block(block, key)
def encrypt_bytes(data: bytes, key): return xxteafile.encrypt_bytes(data, key)
def decrypt_bytes(blob: bytes, key): return xxteafile.decrypt_bytes(blob, key)

def encrypt_stream(source, dest, key, batch_blocks: int | None = None):
    return xxteafile.encrypt_stream(source, dest, key, batch_blocks=batch_blocks)

def decrypt_stream(source, dest, key, batch_blocks: int | None = None):
    return xxteafile.decrypt_stream(source, dest, key, batch_blocks=batch_blocks)
