import unittest

from analytics.models import VideoRecord
from analytics.weekly import aggregate_weeks
from analytics.window import build_window


def _videos(count):
    return [
        VideoRecord(title=f"v{idx}", views=(idx + 1) * 100, retention=30 + idx % 2)
        for idx in range(count)
    ]


class WeeklyAggregateTests(unittest.TestCase):
    def test_small_window_gives_one_point_per_video(self):
        points = aggregate_weeks(build_window(_videos(4)))
        self.assertEqual([point.label for point in points], ["W1", "W2", "W3", "W4"])
        self.assertEqual([point.views for point in points], [100, 200, 300, 400])

    def test_chunks_are_contiguous_and_capped_at_twelve(self):
        points = aggregate_weeks(build_window(_videos(30)))

        # 30 videos -> 12 weeks of 2 videos; the last 6 videos are not charted.
        self.assertEqual(len(points), 12)
        self.assertEqual(points[0].views, 150)
        self.assertEqual(points[0].retention, 30.5)
        self.assertEqual(points[-1].label, "W12")
        self.assertEqual(points[-1].views, 2350)

    def test_full_window(self):
        points = aggregate_weeks(build_window(_videos(50)))
        self.assertEqual(len(points), 12)
        # 4 videos per week.
        self.assertEqual(points[0].views, 250)

    def test_views_round_half_up(self):
        videos = [
            VideoRecord(title="a", views=1, retention=10),
            VideoRecord(title="b", views=2, retention=10),
        ] * 12
        points = aggregate_weeks(build_window(videos))
        self.assertEqual(len(points), 12)
        self.assertEqual(points[0].views, 2)


if __name__ == "__main__":
    unittest.main()
