from agent_demos.demos import inbox, research, resume, spreadsheet

DEMOS = {m.INFO.name: m.INFO for m in (resume, research, inbox, spreadsheet)}
