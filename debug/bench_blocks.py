#!/usr/bin/env python3
"""Quick block engine benchmark - scalar words vs numpy batches"""
import os
import time


KEY = (0x01234567, 0x89ABCDEF, 0xFEDCBA98, 0x76543210)
PAYLOAD = os.urandom(512 * 256)


def bench_scalar(blocks: int = 64):
    from xxteafile.main import xxteafile

    words = [list(range(i, i + xxteafile.BLOCK_WORDS)) for i in range(blocks)]
    start = time.perf_counter()
    for block in words:
        xxteafile.encrypt_block(block, KEY)
    return time.perf_counter() - start, blocks


def bench_batched():
    import xxteafile

    start = time.perf_counter()
    blob = xxteafile.encrypt_bytes(PAYLOAD, KEY)
    elapsed = time.perf_counter() - start
    assert xxteafile.decrypt_bytes(blob, KEY) == PAYLOAD
    return elapsed, len(blob) // 512


def main():
    print("Benchmarking XXTEA 512-byte block encryption...")

    scalar_time, scalar_blocks = bench_scalar()
    print(f"  Scalar : {scalar_blocks} blocks in {scalar_time:.3f}s "
          f"({scalar_time / scalar_blocks * 1000:.2f} ms/block)")

    batch_time, batch_blocks = bench_batched()
    print(f"  Batched: {batch_blocks} blocks in {batch_time:.3f}s "
          f"({batch_time / batch_blocks * 1000:.3f} ms/block)")

    print("\n✅ Benchmark complete")


if __name__ == '__main__':
    main()
