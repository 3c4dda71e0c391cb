"""
Built-in curated vocabulary used when words are served without a quote.

Each entry carries a category that doubles as a search term for the STANDS4
scripts API, so a word can be paired with a screenplay from the same genre.
"""

from __future__ import annotations

from typing import Final

from stickywords.core.contracts.curated import CuratedWord

CURATED_WORDS: Final[tuple[CuratedWord, ...]] = (
    CuratedWord(
        word="Sanguine",
        pronunciation="SANG-gwin",
        definition="Optimistic or positive, especially in a difficult situation.",
        example="Despite the storm rolling in, the captain remained sanguine about the voyage.",
        source="Adventure films",
        category="adventure",
    ),
    CuratedWord(
        word="Perfidious",
        pronunciation="per-FID-ee-us",
        definition="Deceitful and untrustworthy.",
        example="The perfidious adviser sold the king's plans to his rivals.",
        source="Political thrillers",
        category="thriller",
    ),
    CuratedWord(
        word="Laconic",
        pronunciation="luh-KON-ik",
        definition="Using very few words.",
        example="The gunslinger's laconic reply silenced the whole saloon.",
        source="Westerns",
        category="western",
    ),
    CuratedWord(
        word="Mellifluous",
        pronunciation="meh-LIF-loo-us",
        definition="Sweet or musical; pleasant to hear.",
        example="Her mellifluous voice carried across the empty theatre.",
        source="Musicals",
        category="musical",
    ),
    CuratedWord(
        word="Obfuscate",
        pronunciation="OB-fuh-skate",
        definition="To make obscure, unclear, or unintelligible.",
        example="The defense tried to obfuscate the timeline with irrelevant details.",
        source="Courtroom dramas",
        category="courtroom",
    ),
    CuratedWord(
        word="Ephemeral",
        pronunciation="ih-FEM-er-ul",
        definition="Lasting for a very short time.",
        example="Their summer romance was ephemeral, gone before the leaves turned.",
        source="Romantic dramas",
        category="romance",
    ),
    CuratedWord(
        word="Nefarious",
        pronunciation="nih-FAIR-ee-us",
        definition="Wicked or criminal.",
        example="The detective finally uncovered the syndicate's nefarious scheme.",
        source="Crime films",
        category="crime",
    ),
    CuratedWord(
        word="Quixotic",
        pronunciation="kwik-SOT-ik",
        definition="Exceedingly idealistic; unrealistic and impractical.",
        example="His quixotic plan to build a rocket in the backyard charmed the town.",
        source="Comedies",
        category="comedy",
    ),
    CuratedWord(
        word="Ineffable",
        pronunciation="in-EF-uh-bul",
        definition="Too great or extreme to be expressed in words.",
        example="Standing on the alien planet, she felt an ineffable sense of awe.",
        source="Science fiction",
        category="science fiction",
    ),
    CuratedWord(
        word="Pernicious",
        pronunciation="per-NISH-us",
        definition="Having a harmful effect, especially in a gradual or subtle way.",
        example="The pernicious rumor spread through the boarding school within a week.",
        source="Psychological thrillers",
        category="mystery",
    ),
    CuratedWord(
        word="Magnanimous",
        pronunciation="mag-NAN-uh-mus",
        definition="Generous or forgiving, especially toward a rival or less powerful person.",
        example="In victory, the champion was magnanimous toward the fighter she had beaten.",
        source="Sports dramas",
        category="sports",
    ),
    CuratedWord(
        word="Surreptitious",
        pronunciation="sur-up-TISH-us",
        definition="Kept secret, especially because it would not be approved of.",
        example="The spies exchanged a surreptitious glance across the embassy ballroom.",
        source="Spy films",
        category="spy",
    ),
)


__all__ = ["CURATED_WORDS"]
