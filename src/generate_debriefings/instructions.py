DEBRIEFING_PROMPT = """You are an expert analyst reviewing news articles. Please provide a comprehensive debriefing of the following article that includes:

1. A concise summary of the main points
2. Key takeaways and implications
3. Any notable quotes or data points
4. Relevance to current events or trends

Please keep the debriefing informative yet concise, around 200-300 words.

Article Title: {title}
Article Content: {content}"""
