import sys

from chord_timeline import Key, align, capo_for_reference_key, chord_event, current_token, suggest_progression

lyrics = "Amazing grace how sweet the sound"

events = [chord_event("G", 0.0), chord_event("C", 2.0), chord_event("G", 4.0), chord_event("D", 6.0)]
lines = align(lyrics, events, 8.0)

# Chords above words
for line in lines:
    chord_row = ""
    word_row = ""
    for token in line.tokens:
        width = max(len(token.text), len(token.chord_above or "")) + 1
        chord_row += (token.chord_above or "").ljust(width)
        word_row += token.text.ljust(width)
    sys.stdout.write(chord_row.rstrip() + "\n" + word_row.rstrip() + "\n")

# Token under the playhead
token = current_token(lines, 2.5, duration=8.0)
sys.stdout.write(f"At 2.5s: {token.text} ({token.start_time:.2f}-{token.end_time:.2f})\n")

# Instrumental scaffold in A, played with G shapes
scaffold = suggest_progression(Key.A, 8.0)
sys.stdout.write(f"Capo {capo_for_reference_key(Key.A)}: ")
sys.stdout.write(" ".join(e.chord.display for e in scaffold) + "\n")
