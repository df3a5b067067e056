"""Built-in motion catalog."""

from debate_setup.models import Topic, TopicCategory
from debate_setup.types import Difficulty

E, M, H = Difficulty.EASY, Difficulty.MEDIUM, Difficulty.HARD

TOPIC_CATEGORIES: tuple[TopicCategory, ...] = (
    TopicCategory(id="fun", name="Fun & Quirky", icon="😄", color="#FF6B6B",
                  description="Light-hearted debates about everyday things"),
    TopicCategory(id="tech", name="Technology & Future", icon="🤖", color="#4ECDC4",
                  description="AI, future tech, and digital society"),
    TopicCategory(id="philosophy", name="Philosophy & Life", icon="🤔", color="#45B7D1",
                  description="Deep questions about existence and meaning"),
    TopicCategory(id="society", name="Society & Culture", icon="🏛️", color="#96CEB4",
                  description="Politics, culture, and social issues"),
    TopicCategory(id="science", name="Science & Nature", icon="🔬", color="#FECA57",
                  description="Scientific theories and discoveries"),
    TopicCategory(id="entertainment", name="Entertainment & Pop Culture", icon="🎭", color="#FF9FF3",
                  description="Movies, games, and pop culture"),
    TopicCategory(id="health", name="Health & Lifestyle", icon="🏥", color="#54A0FF",
                  description="Wellness, diet, and lifestyle choices"),
    TopicCategory(id="relationships", name="Relationships & Social", icon="💕", color="#FF7675",
                  description="Love, friendship, and human connections"),
)


def _topic(id: str, text: str, category_id: str, difficulty: Difficulty,
           tags: list[str], popularity: int) -> Topic:
    return Topic(id=id, text=text, category_id=category_id, difficulty=difficulty,
                 tags=frozenset(tags), popularity=popularity)


TOPICS: tuple[Topic, ...] = (
    # Fun & Quirky
    _topic("hot-dog-sandwich", "A hot dog is a sandwich.", "fun", E, ["food", "classification"], 5),
    _topic("pineapple-pizza", "Pineapple on pizza is acceptable.", "fun", E, ["food", "taste"], 5),
    _topic("cereal-soup", "Cereal is a soup.", "fun", E, ["food", "classification"], 4),
    _topic("gif-jif", "GIF is pronounced with a hard G.", "fun", E, ["language"], 3),
    _topic("die-hard-xmas", "Die Hard is a Christmas movie.", "fun", E, ["movies"], 4),
    # Technology & Future
    _topic("ai-rights", "AI should have rights.", "tech", H, ["ai", "ethics"], 5),
    _topic("social-media-reg", "Social media should be regulated.", "tech", M, ["policy", "internet"], 4),
    _topic("colonize-mars", "Humanity should colonize Mars.", "tech", H, ["space", "exploration"], 4),
    _topic("ubi", "There should be a universal basic income.", "tech", M, ["economics", "policy"], 4),
    _topic("privacy-dead", "Privacy is dead in the digital age.", "tech", M, ["privacy", "surveillance"], 4),
    # Philosophy & Life
    _topic("free-will", "Free will is an illusion.", "philosophy", H, ["philosophy"], 4),
    _topic("money-happiness", "Money can buy happiness.", "philosophy", M, ["psychology", "economics"], 4),
    _topic("objective-morality", "There is objective morality.", "philosophy", H, ["ethics"], 3),
    _topic("simulation", "We are living in a simulation.", "philosophy", H, ["metaphysics"], 4),
    _topic("altruism", "True altruism exists.", "philosophy", M, ["ethics", "psychology"], 3),
    # Society & Culture
    _topic("tipping-abolish", "Tipping culture should be abolished.", "society", M, ["policy", "service"], 3),
    _topic("college-free", "College should be free.", "society", M, ["education", "policy"], 4),
    _topic("four-day-week", "We should have a four-day work week.", "society", M, ["work", "productivity"], 4),
    _topic("term-limits", "There should be term limits for all politicians.", "society", M, ["politics", "policy"], 3),
    _topic("cancel-culture", "Cancel culture has gone too far.", "society", M, ["culture"], 3),
    # Science & Nature
    _topic("pluto-planet", "Pluto is a planet.", "science", E, ["space"], 4),
    _topic("nuclear-solution", "Nuclear energy is the best climate solution.", "science", M, ["energy", "climate"], 4),
    _topic("bring-back-extinct", "We should bring back extinct species.", "science", H, ["genetics"], 3),
    _topic("multiverse", "There is a multiverse.", "science", H, ["cosmology"], 3),
    _topic("animal-testing", "We should ban animal testing.", "science", M, ["ethics", "science"], 3),
    # Entertainment & Pop Culture
    _topic("remakes-better", "Remakes are better than originals.", "entertainment", E, ["movies"], 2),
    _topic("streaming-killing-cinema", "Streaming is killing cinema.", "entertainment", M, ["movies", "industry"], 3),
    _topic("games-art", "Video games are art.", "entertainment", M, ["games", "art"], 4),
    _topic("sequel-limits", "There should be a limit on sequels.", "entertainment", E, ["movies"], 2),
    _topic("separate-art-artist", "We should separate art from the artist.", "entertainment", M, ["ethics", "culture"], 3),
    # Health & Lifestyle
    _topic("veganism-future", "Veganism is the future.", "health", M, ["diet", "ethics"], 3),
    _topic("ban-smoking", "We should ban smoking completely.", "health", M, ["public health"], 3),
    _topic("intermittent-fasting", "Intermittent fasting is healthy.", "health", E, ["diet"], 3),
    _topic("mental-health-days", "Mental health days should be mandatory.", "health", E, ["work", "health"], 3),
    _topic("screen-time-limit", "We should limit screen time.", "health", E, ["lifestyle"], 3),
    # Relationships & Social
    _topic("marriage-outdated", "Marriage is outdated.", "relationships", M, ["relationships"], 3),
    _topic("open-relationships", "Open relationships are sustainable.", "relationships", M, ["relationships"], 2),
    _topic("online-dating-ruining", "Online dating is ruining romance.", "relationships", M, ["dating"], 3),
    _topic("friendzone-real", "The friendzone is real.", "relationships", E, ["relationships"], 2),
    _topic("live-together-before-marriage", "Couples should live together before marriage.",
           "relationships", E, ["relationships"], 3),
)

CATEGORIES_BY_ID: dict[str, TopicCategory] = {c.id: c for c in TOPIC_CATEGORIES}
