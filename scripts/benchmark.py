import time

from dbc_parser.core.parser import DbcParser


def generate_dbc(num_messages: int, signals_per_message: int) -> str:
    """Synthetic DBC with cycle times and value tables for every message"""
    lines = ['VERSION ""', "", 'BA_DEF_DEF_ "GenMsgCycleTime" 100;', ""]
    for i in range(num_messages):
        message_id = 0x100 + i if i % 2 == 0 else 0x18FF0000 + i
        lines.append(f"BO_ {message_id} Message_{i}: 8 ECU")
        for j in range(signals_per_message):
            order = "1" if j % 2 else "0"
            lines.append(
                f' SG_ Signal_{j} : {j * 8 + 7}|8@{order}+ (0.5,-10) [-10|117.5] "unit" Gateway,Dashboard'
            )
        lines.append(f'BA_ "GenMsgCycleTime" BO_ {message_id} {10 + i % 90};')
        lines.append(f'VAL_ {message_id} Signal_0 0 "Off" 1 "On" 2 "Error" ;')
        lines.append("")
    return "\n".join(lines)


def benchmark_parser():
    parser = DbcParser(metrics_enabled=False)
    text = generate_dbc(num_messages=1000, signals_per_message=8)

    iterations = 5
    start_time = time.perf_counter()

    for _ in range(iterations):
        dbc = parser.parse(text)

    duration = time.perf_counter() - start_time

    print("DBC parser benchmark:")
    print(f"  Input: {len(text)} chars, {len(dbc)} messages, {dbc.signal_count} signals")
    print(f"  Iterations: {iterations}")
    print(f"  Duration: {duration:.2f}s")
    print(f"  Rate: {iterations / duration:.2f} docs/s")


if __name__ == "__main__":
    benchmark_parser()
