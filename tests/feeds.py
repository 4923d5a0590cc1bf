"""Sample feed documents shared by the tests."""

RSS_FEED = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0"
     xmlns:content="http://purl.org/rss/1.0/modules/content/"
     xmlns:dc="http://purl.org/dc/elements/1.1/"
     xmlns:media="http://search.yahoo.com/mrss/">
  <channel>
    <title>Example Blog</title>
    <link>https://blog.example.com/</link>
    <item>
      <title>First Post</title>
      <link>https://blog.example.com/first</link>
      <description>&lt;p&gt;The first post.&lt;/p&gt;</description>
      <content:encoded><![CDATA[<p>Hello <b>world</b></p><img src="https://blog.example.com/inline.png">]]></content:encoded>
      <pubDate>Mon, 01 Jan 2024 10:00:00 GMT</pubDate>
      <dc:creator>Jane Doe</dc:creator>
      <category>tech</category>
      <category domain="https://blog.example.com/tags">news</category>
      <media:content url="https://cdn.example.com/first.jpg" medium="image"/>
    </item>
    <item>
      <title>Podcast: Episode 2</title>
      <link>https://blog.example.com/episode-2</link>
      <description>Listen now</description>
      <pubDate>Tue, 02 Jan 2024 10:00:00 GMT</pubDate>
      <enclosure url="https://blog.example.com/ep2.mp3" type="audio/mpeg" length="1234"/>
    </item>
  </channel>
</rss>
"""

RSS_SINGLE_ITEM = """<?xml version="1.0"?>
<rss version="2.0">
  <channel>
    <title>Single</title>
    <item>
      <title>Only One</title>
      <link>https://single.example.com/1</link>
      <category>solo</category>
    </item>
  </channel>
</rss>
"""

RSS_UNPARSABLE_DATE = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>Dates</title>
    <item>
      <title>Post</title>
      <link>https://dates.example.com/post</link>
      <pubDate>2024年1月1日</pubDate>
    </item>
  </channel>
</rss>
"""

RSS_NO_ITEMS = """<?xml version="1.0"?>
<rss version="2.0"><channel><title>Empty</title></channel></rss>
"""

ATOM_FEED = """<?xml version="1.0" encoding="utf-8"?>
<feed xmlns="http://www.w3.org/2005/Atom">
  <title type="text">Atom Example</title>
  <entry>
    <title type="html">Atom Entry</title>
    <link rel="alternate" href="https://atom.example.com/entry"/>
    <link rel="self" href="https://atom.example.com/entry.xml"/>
    <updated>2024-01-01T10:00:00Z</updated>
    <summary>Entry summary</summary>
    <content type="html">&lt;p&gt;Entry body&lt;/p&gt;&lt;img src="https://atom.example.com/pic.png"&gt;</content>
    <category term="tech"/>
    <category term="life"/>
  </entry>
  <entry>
    <title>Second Entry</title>
    <link href="https://atom.example.com/second"/>
    <published>2024-01-02T10:00:00Z</published>
    <author><name>Alice</name></author>
    <summary>Second summary</summary>
  </entry>
</feed>
"""

UNSUPPORTED_FEED = """<?xml version="1.0"?>
<html><body>Not a feed</body></html>
"""
