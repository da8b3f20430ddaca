RSS_FEEDS = {
    "Interia": "https://fakty.interia.pl/feed",
    "TVN24": "https://tvn24.pl/najwazniejsze.xml",
    "Gazeta.pl": "https://rss.gazeta.pl/pub/rss/gazetapl_top.xml",
    "Onet": "https://wiadomosci.onet.pl/rss/wiadomosci",
}
